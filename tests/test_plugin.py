from __future__ import annotations

import collections
import dataclasses
import datetime
import re

import pytest

from betterjson import errors, plugin, utils


def test_create_plugin():
    enc = lambda k, v: v  # noqa: E731
    dec = lambda k, v: v  # noqa: E731
    p = plugin.create_plugin("thing", enc, dec)
    assert p == plugin.Plugin("thing", enc, dec)
    assert p.encode is enc
    assert p.decode is dec


@pytest.mark.parametrize(
    "args",
    (
        (1, print, print),
        (None, print, print),
        (set, print, print),
        ("thing", "not callable", print),
        ("thing", print, None),
    ),
)
def test_create_plugin_invalid(args):
    with pytest.raises(errors.InvalidPluginError):
        plugin.create_plugin(*args)
    # Still a TypeError for people who don't know about our errors
    with pytest.raises(TypeError):
        plugin.create_plugin(*args)


def test_plugins_are_immutable():
    p = plugin.create_plugin("thing", print, print)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.type_id = "other"


def test_type_id():
    assert utils.type_id(int) == "int"
    assert utils.type_id(set) == "set"
    assert utils.type_id(datetime.datetime) == "datetime.datetime"
    assert utils.type_id(collections.OrderedDict) == "collections.OrderedDict"
    assert utils.type_id(type(re.compile("a"))) == "re.Pattern"

    class Local:
        pass

    assert utils.type_id(Local) == (
        f"{__name__}.test_type_id.<locals>.Local"
    )
    with pytest.raises(TypeError):
        utils.type_id(5)
