"""Tests for environment-backed generator settings."""

from pathlib import Path

import pageforge.config as project_config
from pageforge.pipeline.page_generator.settings import GeneratorSettings


def test_defaults(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(project_config, "PROJECT_ROOT", tmp_path)
    for name in (
        "PAGEFORGE_OUTPUT_DIR",
        "PAGEFORGE_LANG",
        "PAGEFORGE_WRITE_PREVIEW",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    settings = GeneratorSettings()
    assert settings.output_dir == project_config.DEFAULT_OUTPUT_DIR
    assert settings.language == "en"
    assert settings.write_preview is True
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(project_config, "PROJECT_ROOT", tmp_path)
    monkeypatch.setenv("PAGEFORGE_OUTPUT_DIR", str(tmp_path / "site"))
    monkeypatch.setenv("PAGEFORGE_WRITE_PREVIEW", "no")
    settings = GeneratorSettings()
    assert settings.output_dir == tmp_path / "site"
    assert settings.write_preview is False


def test_dotenv_file_is_loaded(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(project_config, "PROJECT_ROOT", tmp_path)
    # Registered so the value written by load_dotenv is undone on teardown
    monkeypatch.setenv("PAGEFORGE_LANG", "en")
    (tmp_path / ".env").write_text("PAGEFORGE_LANG=pt\n", encoding="utf-8")
    assert GeneratorSettings().language == "pt"
