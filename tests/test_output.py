import json

import pytest
import yaml
from rich.table import Table

from serverconf.core.types import ConnectionConfig, ProtocolKind, StreamConfig
from serverconf.output import config_to_dict, render, render_json, render_table, render_yaml

STREAM = StreamConfig(ProtocolKind.SECURE_WEB_SOCKET, "www.google.com", 8888, "chat")
TCP = ConnectionConfig(ProtocolKind.TCP, "www.google.com", 9999)


def test_config_to_dict():
    assert config_to_dict(STREAM) == {
        "type": "StreamConfig",
        "kind": "wss",
        "host": "www.google.com",
        "port": 8888,
        "path": "chat",
    }
    assert "path" not in config_to_dict(TCP)


def test_render_json():
    assert json.loads(render_json(TCP)) == {
        "type": "ConnectionConfig",
        "kind": "tcp",
        "host": "www.google.com",
        "port": 9999,
    }


def test_render_yaml():
    assert yaml.safe_load(render_yaml(STREAM))["path"] == "chat"


def test_render_table():
    table = render_table(STREAM, title="wss")
    assert isinstance(table, Table)
    assert table.row_count == 5
    assert table.title == "wss"


def test_render_dispatch():
    assert render(TCP, "json") == render_json(TCP)
    assert isinstance(render(TCP), Table)
    with pytest.raises(ValueError):
        render(TCP, "xml")
