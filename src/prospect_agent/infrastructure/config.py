"""Configuration dataclasses for the Prospect Agent.

Each config is a plain ``dataclass`` with a ``validate()`` method that raises
``ValueError`` on invalid combinations.  Configs are **frozen** so a single
instance can be shared by any number of orchestrator calls.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from typing import Any

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_CREDENTIAL_ENV_VAR = "API_KEY"


# ===================================================================== #
#  Retry Configuration                                                   #
# ===================================================================== #

@dataclass(frozen=True)
class RetryConfig:
    """Parameters governing the retry/backoff loop around one model call.

    Attributes
    ----------
    max_attempts:
        Total attempts, including the first one.
    initial_backoff:
        Delay in seconds after the first transient failure.  The delay
        doubles after each further failure.
    attempt_timeout:
        Optional upper bound in seconds for a single attempt.  ``None``
        leaves timing to the model port.
    deadline:
        Optional upper bound in seconds for the whole call, retries
        included.  A backoff that would overrun it is not taken.
    """

    max_attempts: int = 3
    initial_backoff: float = 1.0
    attempt_timeout: float | None = None
    deadline: float | None = None

    def validate(self) -> None:
        """Raise ``ValueError`` if any field is out of valid range."""
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.initial_backoff < 0.0:
            raise ValueError(
                f"initial_backoff must be >= 0, got {self.initial_backoff}"
            )
        if self.attempt_timeout is not None and self.attempt_timeout <= 0.0:
            raise ValueError(
                f"attempt_timeout must be > 0, got {self.attempt_timeout}"
            )
        if self.deadline is not None and self.deadline <= 0.0:
            raise ValueError(f"deadline must be > 0, got {self.deadline}")

    def backoff_for(self, attempt_index: int) -> float:
        """Delay after the failure of zero-based attempt *attempt_index*."""
        return self.initial_backoff * (2 ** attempt_index)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RetryConfig:
        valid_keys = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        cfg = cls(**filtered)
        cfg.validate()
        return cfg


# ===================================================================== #
#  Model Configuration                                                   #
# ===================================================================== #

@dataclass(frozen=True)
class ModelConfig:
    """Which hosted model to call and where its credential comes from.

    Attributes
    ----------
    model:
        Model identifier passed to the inference endpoint.
    credential_env_var:
        Environment variable holding the API key.
    enable_search_grounding:
        Attach the search tool so the answer carries citations.
    """

    model: str = DEFAULT_MODEL
    credential_env_var: str = DEFAULT_CREDENTIAL_ENV_VAR
    enable_search_grounding: bool = True

    def validate(self) -> None:
        if not self.model:
            raise ValueError("model must not be empty")
        if not self.credential_env_var:
            raise ValueError("credential_env_var must not be empty")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ModelConfig:
        valid_keys = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        cfg = cls(**filtered)
        cfg.validate()
        return cfg


# ===================================================================== #
#  Unified config loader                                                 #
# ===================================================================== #

_CONFIG_MAP: dict[str, type] = {
    "retry": RetryConfig,
    "model": ModelConfig,
}


def load_config_from_json(json_str: str) -> dict[str, Any]:
    """Parse a JSON string into a dict of typed config objects.

    The JSON is expected to be an object whose top-level keys are config
    section names (``retry``, ``model``).  Unknown sections are preserved
    as raw values.  Missing sections are filled with defaults.
    """
    raw = json.loads(json_str)
    if not isinstance(raw, dict):
        raise ValueError("Top-level JSON must be an object")
    result: dict[str, Any] = {}
    for section, data in raw.items():
        cls = _CONFIG_MAP.get(section)
        if cls is not None and isinstance(data, dict):
            result[section] = cls.from_dict(data)
        else:
            result[section] = data
    for section, cls in _CONFIG_MAP.items():
        result.setdefault(section, cls())
    return result
