from __future__ import annotations

import json
import math

import pytest

import betterjson
from betterjson import errors, plugins

from . import plugin_utils

MARKER = "_@serialized-object"


@pytest.fixture
def s():
    return betterjson.Serializer([plugin_utils.WIDGET, *plugins.BUNDLED])


@pytest.mark.parametrize(
    "value",
    (
        1,
        -5.5,
        "string",
        True,
        None,
        [],
        {},
        [1, "a", None, {"b": [False]}],
        {"nested": {"deeper": [1.5, "x"]}},
    ),
)
def test_passthrough(s, value):
    expected = json.dumps(value, separators=(",", ":"))
    assert s.serialize(value) == expected
    assert s.deserialize(expected) == json.loads(expected)
    assert s.serialize(value, indent=2) == json.dumps(value, indent=2)


def test_passthrough_without_plugins():
    s = betterjson.Serializer()
    assert s.serialize((1, 2)) == "[1,2]"


def test_roundtrip_nested(s):
    w = plugin_utils.Widget("w", [{1, 2}, (3, "x")])
    doc = s.serialize({"w": w})
    assert s.deserialize(doc) == {"w": w}
    res = json.loads(doc)
    assert res["w"][MARKER]["type"] == plugin_utils.WIDGET.type_id
    assert res["w"][MARKER]["version"] == 1
    parts = res["w"][MARKER]["value"]["parts"]
    assert parts[0][MARKER]["type"] == "set"
    assert parts[1] == {
        MARKER: {"version": 1, "type": "tuple", "value": [3, "x"]}
    }


def test_envelope_format(s):
    assert json.loads(s.serialize({1})) == {
        MARKER: {"version": 1, "type": "set", "value": [1]}
    }


def test_special_values_pass_through(s):
    doc = s.serialize([math.nan, math.inf, -math.inf])
    assert doc == "[NaN,Infinity,-Infinity]"


def test_nan_plugin():
    s = betterjson.Serializer(
        [
            betterjson.create_plugin(
                "nan", lambda k, v: "NaN", lambda k, v: math.nan
            ),
            betterjson.create_plugin(
                "infinity",
                lambda k, v: "+" if v > 0 else "-",
                lambda k, v: math.inf if v == "+" else -math.inf,
            ),
        ]
    )
    doc = s.serialize([math.nan, math.inf, -math.inf, 1.0])
    assert json.loads(doc) == [
        {MARKER: {"version": 1, "type": "nan", "value": "NaN"}},
        {MARKER: {"version": 1, "type": "infinity", "value": "+"}},
        {MARKER: {"version": 1, "type": "infinity", "value": "-"}},
        1.0,
    ]
    nan, pinf, minf, one = s.deserialize(doc)
    assert math.isnan(nan)
    assert (pinf, minf, one) == (math.inf, -math.inf, 1.0)


def test_undefined():
    with pytest.raises(errors.SerializationError):
        betterjson.Serializer().serialize([betterjson.UNDEFINED])
    s = betterjson.Serializer(
        [
            betterjson.create_plugin(
                "undefined",
                lambda k, v: None,
                lambda k, v: betterjson.UNDEFINED,
            )
        ]
    )
    assert s.deserialize(s.serialize([betterjson.UNDEFINED, None])) == [
        betterjson.UNDEFINED,
        None,
    ]


def test_overwrite_policy():
    first = betterjson.create_plugin(
        "set", lambda k, v: "first", lambda k, v: "first"
    )
    second = betterjson.create_plugin(
        "set", lambda k, v: "second", lambda k, v: "second"
    )
    s = betterjson.Serializer([first])
    with pytest.raises(errors.DuplicateTypeError):
        s.use(second)
    assert json.loads(s.serialize({1}))[MARKER]["value"] == "first"

    s.set_config("allow_plugins_overwrite", True)
    s.use(second)
    assert json.loads(s.serialize({1}))[MARKER]["value"] == "second"


def test_config_applies_before_plugins():
    s = betterjson.Serializer(
        [plugins.SET, plugins.SET], config={"allow_plugins_overwrite": True}
    )
    assert len(s.registry) == 1


def test_degraded_decode(s):
    doc = s.serialize([plugin_utils.Widget("w", [1, 2])])
    fresh = betterjson.Serializer()
    assert fresh.deserialize(doc) == [{"name": "w", "parts": [1, 2]}]


def test_version_gate(s):
    doc = json.dumps(
        {MARKER: {"version": 2, "type": "set", "value": [1, 2]}}
    )
    with pytest.raises(errors.UnsupportedVersionError):
        s.deserialize(doc)
    doc = json.dumps(
        {MARKER: {"version": 2, "type": "unknown", "value": [1, 2]}}
    )
    with pytest.raises(errors.UnsupportedVersionError):
        s.deserialize(doc)


def test_collision_guard(s):
    v = {MARKER: {"version": 1, "type": "set", "value": [1]}, "other": 1}
    doc = json.dumps(v)
    assert s.deserialize(doc) == v


def test_marker_key(s):
    s.set_config("marker_key", "$type")
    doc = s.serialize({1})
    assert json.loads(doc) == {
        "$type": {"version": 1, "type": "set", "value": [1]}
    }
    assert s.deserialize(doc) == {1}
    # The old marker key is just data now
    s.set_config("marker_key", "other")
    assert s.deserialize(doc) == json.loads(doc)


def test_default_indentation(s):
    s.set_config("default_indentation", 2)
    assert s.serialize([1]) == "[\n  1\n]"
    assert s.serialize([1], indent=0) == "[1]"


def test_serialize_hook(s):
    seen = []

    def hook(k, v):
        seen.append(k)
        if isinstance(v, str):
            return v.upper()
        return v

    doc = s.serialize({"a": "x", "b": plugin_utils.Widget("w", [])}, hook)
    assert s.deserialize(doc) == {"a": "X", "b": plugin_utils.Widget("W", [])}
    # The hook sees the output of plugins, not the envelopes
    assert seen == ["", "a", "b", "value", "name", "parts"]


def test_serialize_hook_runs_before_plugins(s):
    def hook(k, v):
        return {v} if k == "s" else v

    assert s.deserialize(s.serialize({"s": 1}, hook)) == {"s": {1}}


def test_deserialize_hook(s):
    def hook(k, v):
        return (k, v)

    doc = s.serialize({"a": {1}, "b": 2})
    assert s.deserialize(doc, hook) == {"a": ("a", {1}), "b": 2}


def test_transform_errors(s):
    with pytest.raises(errors.TransformError) as exc_info:
        s.serialize({"a": 1}, plugin_utils.explode)
    assert exc_info.value.key == ""
    assert isinstance(exc_info.value.__cause__, plugin_utils.Boom)

    doc = s.serialize({"a": {1}})
    with pytest.raises(errors.TransformError) as exc_info:
        s.deserialize(doc, plugin_utils.explode)
    assert exc_info.value.key == "a"


def test_plugin_errors():
    s = betterjson.Serializer(
        [
            betterjson.create_plugin(
                "set", plugin_utils.explode, plugin_utils.explode
            )
        ]
    )
    with pytest.raises(errors.PluginEncodeError) as exc_info:
        s.serialize({"a": [{1}]})
    assert exc_info.value.key == 0
    assert exc_info.value.type_id == "set"

    doc = betterjson.Serializer([plugins.SET]).serialize({"a": {1}})
    with pytest.raises(errors.PluginDecodeError) as exc_info:
        s.deserialize(doc)
    assert exc_info.value.key == "a"
    assert "kaboom" in str(exc_info.value)


def test_serialization_errors(s):
    with pytest.raises(errors.SerializationError) as exc_info:
        s.serialize([object()])
    assert isinstance(exc_info.value.__cause__, TypeError)

    v = []
    v.append(v)
    with pytest.raises(errors.SerializationError, match="Recursive"):
        s.serialize(v)


def test_deserialization_errors(s):
    with pytest.raises(errors.DeserializationError) as exc_info:
        s.deserialize("{not json")
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)
    # Still a ValueError
    with pytest.raises(ValueError):
        s.deserialize("")


def test_instances_do_not_share_state():
    s1 = betterjson.Serializer([plugins.SET])
    s2 = betterjson.Serializer()
    s1.set_config("marker_key", "$")
    assert s2.get_config("marker_key") == MARKER
    assert "set" not in s2.registry
    assert s2.serialize(1) == "1"


def test_config_delegation(s):
    s.update_config({"default_indentation": 3, "marker_key": "m"})
    assert s.get_config() == {
        "allow_plugins_overwrite": False,
        "marker_key": "m",
        "default_indentation": 3,
    }
    with pytest.raises(errors.UnknownConfigKeyError):
        s.get_config("nope")


def test_use_all():
    s = betterjson.Serializer()
    s.use_all(plugins.BUNDLED)
    assert set(s.registry) == {p.type_id for p in plugins.BUNDLED}
