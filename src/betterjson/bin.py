"""
``betterjson.bin``: msgpack based binary format
===============================================

Same trees as :mod:`betterjson.text`, encoded with `MessagePack
<https://msgpack.org/>`_. Unlike JSON, msgpack handles :class:`bytes` natively
but only supports integers that fit in 64 bits.
"""

from __future__ import annotations

import typing

if typing.TYPE_CHECKING:  # pragma: no cover
    import types
    from typing import Any, Type


from . import base

__all__ = ("dump_bin", "load_bin", "ImportGuard")


class ImportGuard:
    def __enter__(self) -> None:
        pass

    def __exit__(
        self,
        exctype: Type[BaseException] | None,
        excinst: BaseException | None,
        exctb: types.TracebackType | None,
    ) -> None:
        if exctype is not None and issubclass(exctype, ModuleNotFoundError):
            import warnings

            warnings.warn(
                "Support for binary serialisation is not available because of "
                "missing dependencies. You can fix this by running ``pip "
                "install betterjson[msgpack]``"
            )


def dump_bin(obj: Any, visitor: base.Visitor | None = None) -> bytes:
    """Serialise *obj* to the binary format

    Note:

      This feature is only available if betterjson was installed with
      ``msgpack`` (e.g.: via ``pip install betterjson[msgpack]``).

    Raises:
      TypeError: *obj* contains values msgpack can't represent.
      OverflowError: an integer doesn't fit in 64 bits.
      ValueError: *obj* contains itself.
    """
    with ImportGuard():
        import msgpack

    tree = base.replace_tree(obj, visitor)
    packed: bytes = msgpack.packb(tree, use_bin_type=True)
    return packed


def load_bin(packed: bytes, visitor: base.Visitor | None = None) -> Any:
    """Read an object written in binary format

    Note:

      This feature is only available if betterjson was installed with
      ``msgpack`` (e.g.: via ``pip install betterjson[msgpack]``).

    """
    with ImportGuard():
        import msgpack

    tree = msgpack.unpackb(packed, raw=False, strict_map_key=False)
    return base.revive_tree(tree, visitor)
