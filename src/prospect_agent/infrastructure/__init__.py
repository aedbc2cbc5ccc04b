"""Infrastructure layer: configuration, credentials, and model ports."""

from prospect_agent.infrastructure.config import (
    DEFAULT_CREDENTIAL_ENV_VAR,
    DEFAULT_MODEL,
    ModelConfig,
    RetryConfig,
    load_config_from_json,
)
from prospect_agent.infrastructure.credentials import (
    CredentialProvider,
    EnvironmentCredentialProvider,
    StaticCredentialProvider,
)

__all__ = [
    # Config
    "DEFAULT_CREDENTIAL_ENV_VAR",
    "DEFAULT_MODEL",
    "ModelConfig",
    "RetryConfig",
    "load_config_from_json",
    # Credentials
    "CredentialProvider",
    "EnvironmentCredentialProvider",
    "StaticCredentialProvider",
]
