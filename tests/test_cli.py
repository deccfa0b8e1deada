"""Tests for the powerscale-plan command."""

import json
import os
from unittest import mock

import pytest

from powerscale_models.cli import EXIT_CHANGES, EXIT_ERROR, EXIT_NO_CHANGES, main
from powerscale_models.documents import load_document
from powerscale_models.exceptions import DocumentLoadError


@pytest.fixture(autouse=True)
def clean_env():
    names = ["POWERSCALE_MODELS_CONFIG_PATH", "DEBUG", "PLAN_OUTPUT_FORMAT", "SENTRY_DSN"]
    stashed = {n: os.environ.pop(n) for n in names if n in os.environ}
    with mock.patch("powerscale_models.config.parser.logging.basicConfig"):
        yield
    os.environ.update(stashed)


@pytest.fixture
def write_doc(tmp_path):
    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content)
        return str(path)

    return _write


def test_zone_case_difference_plans_nothing(write_doc, capsys):
    state = write_doc("state.yaml", "id: 1\npaths: [/ifs/data]\nzone: system\n")
    config = write_doc("config.yaml", "paths: [/ifs/data]\nzone: System\n")

    assert main(["--state", state, "--config", config]) == EXIT_NO_CHANGES
    assert "nfs_export: 0 to change" in capsys.readouterr().out


def test_zone_change_is_rejected(write_doc, capsys):
    state = write_doc("state.yaml", "id: 1\npaths: [/ifs/data]\nzone: Zone2\n")
    config = write_doc("config.yaml", "paths: [/ifs/data]\nzone: Zone1\n")

    assert main(["-s", state, "-c", config]) == EXIT_ERROR
    out = capsys.readouterr().out
    assert "~ zone: 'Zone2' -> 'Zone1'" in out
    assert "Do not change access zone once set" in out


def test_changes_exit_code_and_json(write_doc, capsys):
    state = write_doc(
        "state.json", '{"id": 1, "paths": ["/ifs/data"], "zone": "System", "read_only": false}'
    )
    config = write_doc(
        "config.json", '{"paths": ["/ifs/data"], "zone": "SYSTEM", "read_only": true}'
    )

    assert main(["-s", state, "-c", config, "--format", "json"]) == EXIT_CHANGES
    result = json.loads(capsys.readouterr().out)
    by_name = {a["name"]: a for a in result["attributes"]}
    assert by_name["read_only"]["action"] == "update"
    assert by_name["zone"]["action"] == "no_change"
    assert by_name["zone"]["planned"] == "System"


def test_invalid_document(write_doc):
    state = write_doc("state.yaml", "- not\n- a mapping\n")
    config = write_doc("config.yaml", "paths: [/ifs/data]\n")
    assert main(["-s", state, "-c", config]) == EXIT_ERROR


def test_missing_document(tmp_path):
    with pytest.raises(DocumentLoadError) as exc:
        load_document(tmp_path / "missing.yaml")
    assert isinstance(exc.value.original_error, OSError)


def test_document_with_invalid_utf8(write_doc, tmp_path):
    state_path = tmp_path / "state.yaml"
    state_path.write_bytes(b"id: 1\npaths: [/ifs/data]\nzone: \xff\xfe\n")
    config = write_doc("config.yaml", "paths: [/ifs/data]\nzone: System\n")

    assert main(["-s", str(state_path), "-c", config]) == EXIT_ERROR


def test_load_document_wraps_decode_errors(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_bytes(b"zone: \xff\xfe\n")
    with pytest.raises(DocumentLoadError):
        load_document(path)
