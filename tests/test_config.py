import pytest

from script_writer.config_loader import ConfigLoader, ModelConfig, DEFAULT_BASE_URL


def test_missing_config_file_uses_defaults(tmp_path):
    loader = ConfigLoader(str(tmp_path / "absent.yaml"))

    assert loader.writer_config.temperature == 0.7
    assert loader.writer_config.json_mode is False
    assert loader.model_overrides == {}


def test_config_file_is_parsed(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "writer_config:\n  temperature: 0.2\n  max_new_tokens: 512\n"
        "model_config:\n  timeout: 10\n",
        encoding="utf-8",
    )
    loader = ConfigLoader(str(path))

    assert loader.writer_config.temperature == 0.2
    assert loader.writer_config.max_new_tokens == 512
    assert loader.model_overrides == {"timeout": 10}


def test_invalid_yaml_raises_value_error(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("writer_config: [unclosed\n", encoding="utf-8")

    with pytest.raises(ValueError):
        ConfigLoader(str(path))


def test_model_config_from_env(monkeypatch):
    monkeypatch.setenv("LLM_API_KEY", "secret")
    monkeypatch.setenv("LLM_MODEL_NAME", "longcat")
    monkeypatch.delenv("LLM_BASE_URL", raising=False)

    model_config = ModelConfig.from_env()

    assert model_config.api_key == "secret"
    assert model_config.model_name == "longcat"
    assert model_config.api_url == DEFAULT_BASE_URL
    assert model_config.timeout == 30


def test_model_config_overrides_win(monkeypatch):
    monkeypatch.setenv("LLM_API_KEY", "secret")
    monkeypatch.setenv("LLM_BASE_URL", "http://localhost:8000/v1")

    model_config = ModelConfig.from_env(timeout=5)

    assert model_config.api_url == "http://localhost:8000/v1"
    assert model_config.timeout == 5
