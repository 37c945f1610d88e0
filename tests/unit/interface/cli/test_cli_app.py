from __future__ import annotations

"""
Unit tests for the CLI application controller (in-process).
"""

import json

import pytest

from treedocs.infra.logging import shutdown_logging
from treedocs.interface.cli.app import _merge_config, main
from treedocs.utils.i18n import i18n


@pytest.fixture(autouse=True)
def _reset_state(capsys):
    yield
    shutdown_logging()
    i18n.load_locale("en")


def test_merge_ignores_none_and_unknown_keys():
    base = {"root_path": "/a", "locale": "en"}
    merged = _merge_config(base, {"root_path": None, "locale": "zh", "other": 1})

    assert merged == {"root_path": "/a", "locale": "zh"}


def test_main_generates_pages(library, capsys):
    code = main([str(library), "C"])

    assert code == 0
    assert (library / "README.md").exists()
    assert (library / "C" / "B" / "B1" / "_sidebar.md").exists()
    assert "Pages written: 10" in capsys.readouterr().out


def test_main_json_summary(library, capsys):
    code = main([str(library), "C", "--json", "--dry-run"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["ok"] is True
    assert payload["dry_run"] is True
    assert payload["summary"]["documents"] == 3
    assert not (library / "README.md").exists()


def test_main_missing_root_exit_code(tmp_path, capsys):
    code = main([str(tmp_path / "nowhere")])

    assert code == 2
    assert "does not exist" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_main_dump_config(tmp_path, capsys):
    config_file = tmp_path / "cfg.json"
    config_file.write_text(json.dumps({"collection_name": "佛藏"}), encoding="utf-8")

    code = main(["--config", str(config_file), "--dump-config", "--locale", "zh"])

    dumped = json.loads(capsys.readouterr().out)
    assert code == 0
    assert dumped["collection_name"] == "佛藏"
    assert dumped["locale"] == "zh"


def test_cli_arguments_override_config_file(tmp_path, library):
    config_file = tmp_path / "cfg.json"
    config_file.write_text(json.dumps({"collection_name": "Ignored", "locale": "zh"}), encoding="utf-8")

    code = main([str(library), "C", "--config", str(config_file)])

    assert code == 0
    root_page = (library / "README.md").read_text(encoding="utf-8")
    assert root_page.startswith("# C\n\n| 归类 | 书籍数量 | 预估字数 | 大小 |")


def test_main_partial_failure_exit_code(library, monkeypatch):
    from treedocs.infra import fs

    def deny(path, content, encoding):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr(fs, "write_text", deny)

    assert main([str(library), "C"]) == 1


def test_main_unexpected_failure_exit_code(library, monkeypatch, capsys):
    from treedocs.interface.cli import app

    def boom(config, *, dry_run=False):
        raise RuntimeError("disk exploded")

    monkeypatch.setattr(app, "run_pipeline", boom)

    assert main([str(library), "C"]) == 1
    assert "Generation failed: disk exploded" in capsys.readouterr().err


def test_main_unknown_locale_falls_back_to_english(library, caplog):
    with caplog.at_level("WARNING", logger="treedocs.interface.cli.app"):
        code = main([str(library), "C", "--locale", "xx"])

    assert code == 0
    assert "Unknown locale 'xx'" in caplog.text
    assert "| Category | Documents |" in (library / "README.md").read_text(encoding="utf-8")
