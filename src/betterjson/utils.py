from __future__ import annotations

import pydoc
from typing import Any

cram = pydoc.cram


def type_id(cls: type[Any]) -> str:
    """Get the identifier the codec uses for values of type *cls*

    Builtins are identified by their bare name, everything else by its module
    and qualified name:

        >>> type_id(set)
        'set'
        >>> import collections
        >>> type_id(collections.OrderedDict)
        'collections.OrderedDict'

    """
    if not isinstance(cls, type):
        raise TypeError(f"Expected a class, got {type(cls).__name__!r}")
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
