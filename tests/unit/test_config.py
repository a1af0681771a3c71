"""Unit tests for config.py"""

import pytest

from slugreg.config import load_config


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each test in an empty directory with no SLUGREG_* env vars."""
    monkeypatch.chdir(tmp_path)
    for name in ("CONTENT_DIR", "REGISTRY_PATH", "EXTENSIONS", "ISSUE_LABELS", "HTTP_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(f"SLUGREG_{name}", raising=False)


def test_load_config_defaults():
    """Settings defaults apply when no slugreg.yaml, env var, or override exists."""
    settings = load_config()
    assert settings.content_dir == "content"
    assert settings.registry_path == "taxonomy.yaml"
    assert settings.extensions == [".md", ".mdx"]
    assert settings.issue_labels == ["taxonomy", "bug"]
    assert settings.log_level == "WARNING"


def test_load_config_reads_yaml(tmp_path):
    (tmp_path / "slugreg.yaml").write_text("content_dir: posts\nregistry_path: data/tax.yaml\n")
    settings = load_config()
    assert settings.content_dir == "posts"
    assert settings.registry_path == "data/tax.yaml"


def test_load_config_env_overrides_yaml(tmp_path, monkeypatch):
    """SLUGREG_REGISTRY_PATH takes precedence over slugreg.yaml."""
    (tmp_path / "slugreg.yaml").write_text("registry_path: from-yaml.yaml\n")
    monkeypatch.setenv("SLUGREG_REGISTRY_PATH", "from-env.yaml")
    assert load_config().registry_path == "from-env.yaml"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("SLUGREG_CONTENT_DIR", "env-content")
    assert load_config(overrides={"content_dir": "cli-content"}).content_dir == "cli-content"
    assert load_config(overrides={"content_dir": None}).content_dir == "env-content"


def test_load_config_env_lists_are_comma_separated(monkeypatch):
    monkeypatch.setenv("SLUGREG_EXTENSIONS", "md, markdown")
    monkeypatch.setenv("SLUGREG_ISSUE_LABELS", "taxonomy,content")
    settings = load_config()
    assert settings.extensions == [".md", ".markdown"]
    assert settings.issue_labels == ["taxonomy", "content"]


def test_load_config_env_timeout_coerced(monkeypatch):
    monkeypatch.setenv("SLUGREG_HTTP_TIMEOUT", "5")
    assert load_config().http_timeout == 5.0


def test_load_config_log_level_normalized(monkeypatch):
    monkeypatch.setenv("SLUGREG_LOG_LEVEL", "debug")
    assert load_config().log_level == "DEBUG"


def test_load_config_invalid_yaml(tmp_path):
    (tmp_path / "slugreg.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid slugreg.yaml"):
        load_config()


def test_load_config_invalid_value(monkeypatch):
    monkeypatch.setenv("SLUGREG_HTTP_TIMEOUT", "0")
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config()
