"""
Unit tests for environment configuration
"""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from topojson_featureset import config
from topojson_featureset.core.constants import DEFAULT_SIMPLIFY_TOLERANCE


def test_featureset_config_defaults_follow_module_settings():
    cfg = config.FeaturesetConfig()

    assert cfg.debug == config.DEBUG
    assert cfg.simplify_tolerance == config.SIMPLIFY_TOLERANCE
    assert cfg.encoding == config.DEFAULT_ENCODING
    assert cfg.log_path == config.LOG_PATH


def test_env_float_default_when_unset(monkeypatch):
    monkeypatch.delenv("TOPOJSON_SIMPLIFY_TOLERANCE", raising=False)
    assert config._env_float("TOPOJSON_SIMPLIFY_TOLERANCE", DEFAULT_SIMPLIFY_TOLERANCE) == DEFAULT_SIMPLIFY_TOLERANCE


def test_env_float_parses_value(monkeypatch):
    monkeypatch.setenv("TOPOJSON_SIMPLIFY_TOLERANCE", "2")
    assert config._env_float("TOPOJSON_SIMPLIFY_TOLERANCE", 0.0) == 2.0


def test_env_float_rejects_garbage(monkeypatch):
    monkeypatch.setenv("TOPOJSON_SIMPLIFY_TOLERANCE", "two")
    with pytest.raises(ValueError):
        config._env_float("TOPOJSON_SIMPLIFY_TOLERANCE", 0.0)


@pytest.mark.parametrize("raw, expected", [
    ("true", True),
    ("1", True),
    ("YES", True),
    ("false", False),
    ("", False),
])
def test_env_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("TOPOJSON_DEBUG", raw)
    assert config._env_flag("TOPOJSON_DEBUG") is expected


def test_select_env_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert config._select_env_file("production") is None

    (tmp_path / ".env").write_text("TOPOJSON_DEBUG=false\n")
    assert config._select_env_file("production") == ".env"

    (tmp_path / ".env.production").write_text("TOPOJSON_DEBUG=false\n")
    assert config._select_env_file("production") == ".env.production"
    assert config._select_env_file("development") == ".env"
