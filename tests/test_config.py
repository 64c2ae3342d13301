from pathlib import Path

import pytest

from gradient_generator.config import CONFIG_ENV_VAR, AppConfig, load_config

REPO_CONFIG = Path(__file__).resolve().parents[1] / "config.yaml"


def test_defaults():
    config = AppConfig()
    assert (config.batch.width, config.batch.height) == (5000, 5000)
    assert config.logging.level == "INFO"
    assert config.ui.min_size == (900, 600)


def test_repo_config_loads():
    config = AppConfig.from_yaml(REPO_CONFIG)
    assert config == AppConfig()


def test_partial_yaml_keeps_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("batch:\n  width: 640\nui:\n  min_size: [320, 280]\n", encoding="utf-8")

    config = AppConfig.from_yaml(path)
    assert config.batch.width == 640
    assert config.batch.height == 5000
    assert config.ui.min_size == (320, 280)
    assert config.ui.color_theme == "blue"


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert AppConfig.from_yaml(path) == AppConfig()


@pytest.mark.parametrize(
    "text",
    ["colors:\n  width: 1\n", "batch:\n  depth: 3\n", "- just\n- a list\n", "batch: [unclosed\n"],
)
def test_invalid_config_is_rejected(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ValueError):
        AppConfig.from_yaml(path)


def test_load_config_without_path_uses_defaults(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert load_config() == AppConfig()


def test_load_config_from_env(monkeypatch, tmp_path):
    path = tmp_path / "env.yaml"
    path.write_text("logging:\n  level: DEBUG\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert load_config().logging.level == "DEBUG"
