from __future__ import annotations

import dataclasses
from typing import Any

from betterjson import create_plugin, type_id


@dataclasses.dataclass
class Widget:
    name: str
    parts: list[Any]


def _encode_widget(key, w: Widget):
    return {"name": w.name, "parts": w.parts}


def _decode_widget(key, v):
    return Widget(v["name"], v["parts"])


WIDGET = create_plugin(type_id(Widget), _encode_widget, _decode_widget)


class Boom(Exception):
    pass


def explode(*args):
    raise Boom("kaboom")
