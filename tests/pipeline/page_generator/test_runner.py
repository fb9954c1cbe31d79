"""Tests for the headless runner."""

import json
from pathlib import Path

import pytest

import pageforge.config as project_config
from pageforge.pipeline.page_generator.runner import (
    generate_to_directory,
    run_from_config,
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path: Path):
    """Keep a developer `.env` and ambient variables out of runner tests."""
    monkeypatch.setattr(project_config, "PROJECT_ROOT", tmp_path / "no-project")
    for name in ("PAGEFORGE_OUTPUT_DIR", "PAGEFORGE_LANG", "PAGEFORGE_WRITE_PREVIEW"):
        monkeypatch.delenv(name, raising=False)


def _write_config(tmp_path: Path, **overrides) -> Path:
    document = {"productName": "Acme", "benefits": ["Fast"], **overrides}
    path = tmp_path / "page.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_run_from_config_success(tmp_path: Path):
    out = tmp_path / "out"
    assert run_from_config(_write_config(tmp_path), output_dir=out) is True
    assert (out / "acme.html").exists()
    assert (out / "styles.css").exists()
    assert (out / "script.js").exists()
    assert (out / "preview.html").exists()


def test_run_from_config_missing_file_returns_false(tmp_path: Path, caplog):
    assert run_from_config(tmp_path / "missing.json", output_dir=tmp_path) is False
    assert "Failed to generate landing page" in caplog.text


def test_settings_supply_output_dir_and_preview(monkeypatch, tmp_path: Path):
    out = tmp_path / "env-out"
    monkeypatch.setenv("PAGEFORGE_OUTPUT_DIR", str(out))
    monkeypatch.setenv("PAGEFORGE_WRITE_PREVIEW", "0")
    written = generate_to_directory(_write_config(tmp_path, animations=False))
    assert {p.name for p in written} == {"acme.html", "styles.css"}
    assert all(p.parent == out for p in written)


def test_settings_language_is_fallback(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("PAGEFORGE_LANG", "pt")
    written = generate_to_directory(_write_config(tmp_path), tmp_path / "o")
    assert '<html lang="pt-BR">' in written[0].read_text(encoding="utf-8")
