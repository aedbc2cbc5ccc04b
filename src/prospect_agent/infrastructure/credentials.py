"""Credential providers.

The orchestrator never reads the environment itself.  It is handed a
:class:`CredentialProvider` and resolves it once per call, so a key that
changes between submissions is picked up on the next one.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping

from prospect_agent.infrastructure.config import DEFAULT_CREDENTIAL_ENV_VAR

logger = logging.getLogger(__name__)


class CredentialProvider(ABC):
    """Source of the API key used to authenticate model calls."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Where the credential comes from, for error messages."""
        ...

    @abstractmethod
    def resolve(self) -> str | None:
        """Return the current credential, or ``None`` if there is none."""
        ...


class EnvironmentCredentialProvider(CredentialProvider):
    """Reads the key from an environment variable on every resolve.

    Parameters
    ----------
    var_name:
        Name of the variable.  Defaults to ``API_KEY``.
    environ:
        Mapping to read from.  Defaults to ``os.environ``.
    """

    def __init__(
        self,
        var_name: str = DEFAULT_CREDENTIAL_ENV_VAR,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._var_name = var_name
        self._environ = environ if environ is not None else os.environ

    @property
    def var_name(self) -> str:
        return self._var_name

    @property
    def description(self) -> str:
        return f"{self._var_name} environment variable"

    def resolve(self) -> str | None:
        value = self._environ.get(self._var_name, "").strip()
        if not value:
            logger.debug("Credential variable %s is not set", self._var_name)
            return None
        return value

    def __repr__(self) -> str:
        return f"EnvironmentCredentialProvider(var_name={self._var_name!r})"


class StaticCredentialProvider(CredentialProvider):
    """Always returns the same key.  Useful for tests and embedding."""

    def __init__(self, api_key: str | None) -> None:
        self._api_key = api_key

    @property
    def description(self) -> str:
        return "static credential"

    def resolve(self) -> str | None:
        return self._api_key or None

    def __repr__(self) -> str:
        state = "set" if self._api_key else "unset"
        return f"StaticCredentialProvider({state})"
