import base64
import json
from pathlib import Path

import pytest

from ashttp_query.cli import main
from ashttp_query.constants import EXAMPLE_QUERY


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "ashttp-query.cfg"


def test_demo_prints_decoded_example(config_path, capsys):
    assert main(["-c", str(config_path), "demo"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["commandName"] == "FolderSync"
    assert payload["locale"] == 2052
    assert payload["deviceId"] == "9e0c42ba363b9358a2e38141f6582c5d"
    assert payload["deviceType"] == "WindowsMail"
    assert payload["commandParams"] is None


def test_decode_accepts_request_url(config_path, capsys):
    url = f"https://mail.example.com/Microsoft-Server-ActiveSync?{EXAMPLE_QUERY}"

    assert main(["-c", str(config_path), "decode", url]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["policyKey"] == 2828802690


def test_decode_uses_configured_indent(config_path, capsys):
    config_path.write_text("[output]\nindent = 0\n", encoding="utf-8")

    assert main(["-c", str(config_path), "decode", EXAMPLE_QUERY]) == 0

    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert json.loads(out)["commandCode"] == 9


def test_decode_reports_invalid_query(config_path, capsys):
    short = base64.b64encode(b"\x8d\x01").decode("ascii")

    assert main(["-c", str(config_path), "decode", short]) == 1
    assert capsys.readouterr().out == ""


def test_decode_reports_malformed_base64(config_path):
    assert main(["-c", str(config_path), "decode", "not base64!"]) == 1


def test_decode_reports_url_without_query(config_path):
    assert main(["-c", str(config_path), "decode", "https://mail.example.com/x"]) == 1


def test_show_config(config_path, capsys):
    assert main(["-c", str(config_path), "show-config"]) == 0

    out = capsys.readouterr().out
    assert f"Configuration loaded from {config_path}" in out
    assert "[output]" in out
    assert "indent = 2" in out
