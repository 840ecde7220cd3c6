"""测试配置加载"""

import json

import pytest
from pydantic import ValidationError

from local_llm_bridge.config import Config, LoggingConfig, load_config


class TestConfig:
    """测试配置模型"""

    def test_endpoint_trailing_slash_stripped(self):
        config = Config(endpoint="http://localhost:8000/v1/", model="m")

        assert config.endpoint == "http://localhost:8000/v1"
        assert config.api_key is None
        assert config.request_timeout is None
        assert config.logging.level == "INFO"

    def test_empty_endpoint_rejected(self):
        with pytest.raises(ValidationError):
            Config(endpoint=" / ", model="m")

    def test_empty_model_rejected(self):
        with pytest.raises(ValidationError):
            Config(endpoint="http://localhost", model="")

    def test_config_is_immutable(self):
        config = Config(endpoint="http://localhost", model="m")

        with pytest.raises(ValidationError):
            config.model = "other"

    def test_log_level_upper_cased(self):
        assert LoggingConfig(level="debug").level == "DEBUG"


class TestConfigLoading:
    """测试配置来源"""

    def test_from_file(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(
            json.dumps(
                {
                    "endpoint": "http://llm:3000/api",
                    "model": "gpt-4.1",
                    "api_key": "sk-test",
                    "request_timeout": 30,
                    "logging": {"level": "debug", "file": "logs/app.log"},
                }
            ),
            encoding="utf-8",
        )

        config = Config.from_file(path)

        assert config.endpoint == "http://llm:3000/api"
        assert config.api_key == "sk-test"
        assert config.request_timeout == 30
        assert config.logging.file == "logs/app.log"

    def test_from_env(self):
        config = Config.from_env(
            {
                "LLM_URL": "http://llm:3000/api",
                "LLM_MODEL": "gpt-4.1",
                "LLM_API_KEY": "sk-test",
                "LLM_LOG_LEVEL": "warning",
            }
        )

        assert config.model == "gpt-4.1"
        assert config.api_key == "sk-test"
        assert config.logging.level == "WARNING"

    def test_from_env_missing_variables(self):
        with pytest.raises(ValueError, match="LLM_MODEL"):
            Config.from_env({"LLM_URL": "http://llm"})

    def test_load_config_prefers_file(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"endpoint": "http://file", "model": "f"}))
        monkeypatch.setenv("CONFIG_PATH", str(path))
        monkeypatch.setenv("LLM_URL", "http://env")
        monkeypatch.setenv("LLM_MODEL", "e")

        assert load_config().endpoint == "http://file"

    def test_load_config_falls_back_to_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CONFIG_PATH", str(tmp_path / "missing.json"))
        monkeypatch.setenv("LLM_URL", "http://env")
        monkeypatch.setenv("LLM_MODEL", "e")
        monkeypatch.delenv("LLM_API_KEY", raising=False)

        config = load_config()

        assert config.endpoint == "http://env"
        assert config.api_key is None

    def test_load_config_explicit_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")
