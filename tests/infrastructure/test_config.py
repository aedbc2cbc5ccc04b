"""Tests for configuration dataclasses and the JSON loader."""

from __future__ import annotations

import json

import pytest

from prospect_agent.infrastructure.config import (
    DEFAULT_MODEL,
    ModelConfig,
    RetryConfig,
    load_config_from_json,
)


class TestRetryConfig:

    def test_defaults(self) -> None:
        cfg = RetryConfig()
        assert cfg.max_attempts == 3
        assert cfg.initial_backoff == 1.0
        assert cfg.attempt_timeout is None
        assert cfg.deadline is None

    def test_backoff_doubles(self) -> None:
        cfg = RetryConfig()
        assert [cfg.backoff_for(i) for i in range(3)] == [1.0, 2.0, 4.0]

    def test_validate_attempts(self) -> None:
        with pytest.raises(ValueError, match="max_attempts"):
            RetryConfig(max_attempts=0).validate()

    def test_validate_backoff(self) -> None:
        with pytest.raises(ValueError, match="initial_backoff"):
            RetryConfig(initial_backoff=-1.0).validate()

    def test_validate_timeouts(self) -> None:
        with pytest.raises(ValueError, match="attempt_timeout"):
            RetryConfig(attempt_timeout=0.0).validate()
        with pytest.raises(ValueError, match="deadline"):
            RetryConfig(deadline=-5.0).validate()

    def test_from_dict_ignores_unknown_keys(self) -> None:
        cfg = RetryConfig.from_dict({"max_attempts": 5, "jitter": True})
        assert cfg.max_attempts == 5

    def test_frozen(self) -> None:
        cfg = RetryConfig()
        with pytest.raises(AttributeError):
            cfg.max_attempts = 9  # type: ignore[misc]


class TestModelConfig:

    def test_defaults(self) -> None:
        cfg = ModelConfig()
        assert cfg.model == DEFAULT_MODEL
        assert cfg.credential_env_var == "API_KEY"
        assert cfg.enable_search_grounding is True

    def test_validate_empty_model(self) -> None:
        with pytest.raises(ValueError, match="model must not be empty"):
            ModelConfig(model="").validate()

    def test_to_dict(self) -> None:
        assert ModelConfig().to_dict()["model"] == DEFAULT_MODEL


class TestLoadConfigFromJson:

    def test_sections_parsed(self) -> None:
        text = json.dumps({
            "retry": {"max_attempts": 4, "initial_backoff": 0.5},
            "model": {"model": "gemini-2.5-pro"},
        })
        loaded = load_config_from_json(text)
        assert loaded["retry"] == RetryConfig(max_attempts=4, initial_backoff=0.5)
        assert loaded["model"].model == "gemini-2.5-pro"

    def test_missing_sections_default(self) -> None:
        loaded = load_config_from_json("{}")
        assert loaded["retry"] == RetryConfig()
        assert loaded["model"] == ModelConfig()

    def test_unknown_section_preserved(self) -> None:
        loaded = load_config_from_json('{"ui": {"theme": "dark"}}')
        assert loaded["ui"] == {"theme": "dark"}

    def test_top_level_must_be_object(self) -> None:
        with pytest.raises(ValueError, match="object"):
            load_config_from_json("[1, 2]")

    def test_invalid_values_rejected(self) -> None:
        with pytest.raises(ValueError):
            load_config_from_json('{"retry": {"max_attempts": 0}}')
