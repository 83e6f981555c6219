from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from betterjson import Serializer, cli, plugins

from . import plugin_utils


@pytest.fixture
def doc(tmp_path):
    s = Serializer([plugin_utils.WIDGET, *plugins.BUNDLED])
    path = tmp_path / "doc.json"
    path.write_text(
        s.serialize({"a": [{1}], "w": plugin_utils.Widget("w", [(1,)])})
    )
    return path


def test_iter_envelopes():
    node = json.loads(
        Serializer(plugins.BUNDLED).serialize({"x": [({1},)]}, indent=0)
    )
    found = [
        (cli.format_path(path), env.type)
        for path, env in cli.iter_envelopes(node, "_@serialized-object")
    ]
    assert found == [("$.x[0]", "tuple"), ("$.x[0].value[0]", "set")]


def test_inspect(doc):
    res = CliRunner().invoke(cli.cli, ["inspect", str(doc)])
    assert res.exit_code == 0, res.output
    lines = res.output.splitlines()
    assert lines[0] == "$.a[0]: 'set' (version=1) OK"
    assert lines[1].startswith("$.w: ")
    assert lines[1].endswith("NO PLUGIN")
    assert lines[2] == "$.w.value.parts[0]: 'tuple' (version=1) OK"


def test_inspect_unsupported_version(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text(
        json.dumps({"$": {"version": 7, "type": "set", "value": []}})
    )
    res = CliRunner().invoke(cli.cli, ["inspect", "--marker", "$", str(path)])
    assert res.exit_code == 1
    assert "UNSUPPORTED VERSION" in res.output


def test_inspect_invalid(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text("{")
    res = CliRunner().invoke(cli.cli, ["inspect", str(path)])
    assert res.exit_code == 1
    assert "invalid JSON document" in res.output


def test_reindent(doc):
    res = CliRunner().invoke(cli.cli, ["reindent", "--indent", "4", str(doc)])
    assert res.exit_code == 0, res.output
    expected = json.dumps(json.loads(doc.read_text()), indent=4)
    assert res.output == expected + "\n"
    assert json.loads(res.output) == json.loads(doc.read_text())
