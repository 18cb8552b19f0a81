"""Tests for client configuration and environment settings."""

import pytest

from drone_client import Client, ClientConfig, DroneSettings, ValidationError
from drone_client.core.config import validate_client_config, write_user_env_vars


class TestClientConfig:
    """Tests for ClientConfig validation."""

    def test_valid_config(self):
        config = validate_client_config({"url": "https://drone.example.com", "token": "abc"})
        assert isinstance(config, ClientConfig)
        assert config.base_url.startswith("https://drone.example.com")
        assert config.token == "abc"
        assert config.timeout is None

    def test_http_scheme_allowed(self):
        config = validate_client_config({"url": "http://localhost:8080", "token": "abc"})
        assert config.base_url.startswith("http://localhost:8080")

    def test_config_instance_passes_through(self):
        config = ClientConfig(url="https://drone.example.com", token="abc")
        assert validate_client_config(config) is config

    def test_rejects_other_schemes(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_client_config({"url": "ftp://drone.example.com", "token": "abc"})
        assert excinfo.value.field == "url"
        assert "https?" in excinfo.value.constraint

    def test_missing_token(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_client_config({"url": "https://drone.example.com"})
        assert excinfo.value.field == "token"
        assert excinfo.value.constraint == "is required"

    def test_empty_token(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_client_config({"url": "https://drone.example.com", "token": ""})
        assert excinfo.value.field == "token"

    def test_non_mapping_config(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_client_config("https://drone.example.com")
        assert excinfo.value.constraint == "must be of type object"

    def test_config_is_frozen(self):
        config = ClientConfig(url="https://drone.example.com", token="abc")
        with pytest.raises(Exception):
            config.token = "other"

    def test_client_construction_fails_synchronously(self):
        with pytest.raises(ValidationError):
            Client({"url": "drone.example.com", "token": "abc"})


class TestDroneSettings:
    """Tests for environment-backed settings."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DRONE_SERVER", "https://ci.example.org")
        monkeypatch.setenv("DRONE_TOKEN", "from-env")
        monkeypatch.setenv("DRONE_HTTP_TIMEOUT_SECONDS", "12.5")

        settings = DroneSettings(_env_file=None)
        config = settings.to_client_config()

        assert config.base_url.startswith("https://ci.example.org")
        assert config.token == "from-env"
        assert config.timeout == 12.5

    def test_missing_server(self, monkeypatch):
        monkeypatch.delenv("DRONE_SERVER", raising=False)
        monkeypatch.setenv("DRONE_TOKEN", "from-env")

        settings = DroneSettings(_env_file=None)
        with pytest.raises(ValidationError) as excinfo:
            settings.to_client_config()
        assert excinfo.value.field == "url"

    def test_client_from_settings(self):
        settings = DroneSettings(_env_file=None, server="https://ci.example.org", token="t")
        client = Client.from_settings(settings)
        assert client.config.token == "t"


class TestUserEnvFile:
    """Tests for the per-user .env writer."""

    def test_writes_and_merges(self, tmp_path):
        env_path = tmp_path / "drone-client" / ".env"
        write_user_env_vars({"DRONE_SERVER": "https://a.example"}, env_path)
        write_user_env_vars({"DRONE_TOKEN": "t0k"}, env_path)

        lines = env_path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("#")
        assert "DRONE_SERVER=https://a.example" in lines
        assert "DRONE_TOKEN=t0k" in lines
