import pytest

from hetznerkit.infrastructure.config import settings
from hetznerkit.infrastructure.config.settings import (
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    clear_test_config,
    get_cloud_base_url,
    get_cloud_token,
    get_config,
    get_dns_token,
    get_http_timeout,
    load_configuration,
    reset_configuration,
    set_config_for_testing,
)


@pytest.fixture
def fresh_config(tmp_path, monkeypatch):
    """Starts from an unloaded configuration with the cwd in an empty directory."""
    monkeypatch.chdir(tmp_path)
    reset_configuration()
    yield tmp_path
    reset_configuration()


def test_yaml_values_are_flattened(fresh_config):
    config_file = fresh_config / "config.yaml"
    config_file.write_text("cloud:\n  token: yaml-token\n  base_url: http://yaml/v1\nhttp:\n  timeout: 5\n")

    load_configuration(config_file=config_file)

    assert get_cloud_token() == "yaml-token"
    assert get_cloud_base_url() == "http://yaml/v1"
    assert get_http_timeout() == 5.0


def test_environment_overrides_yaml(fresh_config, monkeypatch):
    config_file = fresh_config / "config.yaml"
    config_file.write_text("cloud:\n  token: yaml-token\n")
    monkeypatch.setenv("HCLOUD_TOKEN", "env-token")

    load_configuration(config_file=config_file)

    assert get_cloud_token() == "env-token"


def test_dotenv_file_is_loaded_without_overriding_env(fresh_config, monkeypatch):
    env_file = fresh_config / ".env"
    env_file.write_text("HETZNER_DNS_TOKEN=dotenv-dns\nHCLOUD_TOKEN=dotenv-cloud\n")
    monkeypatch.setenv("HCLOUD_TOKEN", "real-env")
    # load_dotenv writes into os.environ; register the key so monkeypatch removes it afterwards
    monkeypatch.setenv("HETZNER_DNS_TOKEN", "placeholder")
    monkeypatch.delenv("HETZNER_DNS_TOKEN")

    load_configuration(config_file=fresh_config / "missing.yaml")

    assert get_dns_token() == "dotenv-dns"
    assert get_cloud_token() == "real-env"


def test_invalid_yaml_is_reported_and_ignored(fresh_config, caplog):
    config_file = fresh_config / "config.yaml"
    config_file.write_text("cloud: [unclosed\n")

    load_configuration(config_file=config_file)

    assert get_cloud_token() is None
    assert "Failed to load or parse YAML config" in caplog.text


def test_load_is_idempotent(fresh_config):
    config_file = fresh_config / "config.yaml"
    config_file.write_text("dns:\n  token: first\n")
    load_configuration(config_file=config_file)

    config_file.write_text("dns:\n  token: second\n")
    load_configuration(config_file=config_file)

    assert get_dns_token() == "first"


def test_env_values_are_coerced(monkeypatch):
    monkeypatch.setenv("FEATURE_ENABLED", "true")
    monkeypatch.setenv("HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("RETRY_LIMIT", "4")
    monkeypatch.setenv("REGION", "fsn1")

    assert get_config("feature.enabled") is True
    assert get_config("http.timeout") == 2.5
    assert get_config("retry.limit") == 4
    assert get_config("region") == "fsn1"
    assert get_config("not.set", "fallback") == "fallback"


def test_test_config_has_highest_priority(monkeypatch):
    monkeypatch.setenv("HCLOUD_TOKEN", "env-token")
    set_config_for_testing({"HCLOUD_TOKEN": "test-token"})

    assert get_cloud_token() == "test-token"

    clear_test_config()
    assert get_cloud_token() == "env-token"


def test_invalid_timeout_falls_back_to_default():
    set_config_for_testing({"http.timeout": "fast"})

    assert get_http_timeout() == DEFAULT_HTTP_TIMEOUT_SECONDS


def test_token_is_returned_as_string(monkeypatch):
    monkeypatch.setattr(settings, "_config", {"cloud.token": 12345})

    assert get_cloud_token() == "12345"
