"""Request orchestration for prospect reports.

:class:`ProspectRequestOrchestrator` is the single entry point the form
front end calls.  One call walks through::

    IDLE -> BUILDING -> ATTEMPTING(n) -> SUCCEEDED
                              |
                              +-> BACKING_OFF -> ATTEMPTING(n+1)
                              +-> FAILED

It resolves the credential (failing fast when there is none), builds the
prompt, invokes the model port through the :class:`RetryEngine`, and
normalizes the answer.  Every failure leaves as one of the
:class:`ProspectingError` subclasses with the upstream message preserved.

The orchestrator keeps no per-call state on ``self`` and may be invoked
again, or concurrently for separate submissions.
"""

from __future__ import annotations

import asyncio
import logging

from prospect_agent.domain.enums import CallState, ErrorKind
from prospect_agent.domain.exceptions import (
    CredentialError,
    FatalRequestError,
    ProspectingError,
    TransientServiceError,
)
from prospect_agent.domain.values import ProspectInput, ProspectReport, RetryState
from prospect_agent.infrastructure.config import ModelConfig, RetryConfig
from prospect_agent.infrastructure.credentials import (
    CredentialProvider,
    EnvironmentCredentialProvider,
)
from prospect_agent.infrastructure.llm import (
    InvocationOptions,
    ModelInvocationPort,
    RawModelResponse,
)
from prospect_agent.services.classification import (
    ErrorClassifier,
    SubstringErrorClassifier,
)
from prospect_agent.services.normalization import normalize_response
from prospect_agent.services.prompt import build_prompt
from prospect_agent.services.retry import RetryEngine, SleepFn

logger = logging.getLogger(__name__)

CREDENTIAL_MESSAGE = (
    "API Key issue: Please select or re-select your API key. If the problem "
    "persists, ensure the key is valid. Original error: {error}"
)
OVERLOADED_MESSAGE = (
    "The AI model is currently overloaded. Please try again in a few moments. "
    "Original error: {error}"
)
FATAL_MESSAGE = "Failed to generate prospect data: {error}"
CANCELLED_MESSAGE = "Failed to generate prospect data: the request was cancelled"


class ProspectRequestOrchestrator:
    """Turns a :class:`ProspectInput` into a :class:`ProspectReport`.

    Parameters
    ----------
    port:
        The model invocation port to call.
    credentials:
        Where the API key comes from.  Resolved once per call.
    classifier:
        Decides transient vs credential vs fatal.  Defaults to
        :class:`SubstringErrorClassifier`.
    retry_config:
        Attempt limit and backoff.  Defaults to three attempts starting at
        one second.
    model_config:
        Model name and search-grounding switch.
    sleep:
        Awaitable sleep for backoff.  Defaults to ``asyncio.sleep``.
    """

    def __init__(
        self,
        port: ModelInvocationPort,
        credentials: CredentialProvider,
        classifier: ErrorClassifier | None = None,
        retry_config: RetryConfig | None = None,
        model_config: ModelConfig | None = None,
        sleep: SleepFn | None = None,
    ) -> None:
        self._port = port
        self._credentials = credentials
        self._classifier = classifier or SubstringErrorClassifier()
        self._model_config = model_config or ModelConfig()
        self._model_config.validate()
        self._sleep = sleep or asyncio.sleep
        self._engine = RetryEngine(retry_config, sleep=self._backoff)

    @property
    def classifier(self) -> ErrorClassifier:
        return self._classifier

    @property
    def retry_config(self) -> RetryConfig:
        return self._engine.config

    async def generate_prospect_data(self, inputs: ProspectInput) -> ProspectReport:
        """Generate a prospect report for *inputs*.

        Raises
        ------
        CredentialError
            No credential is available, or the endpoint rejected it.
        TransientServiceError
            The service stayed overloaded through every attempt.
        FatalRequestError
            Any other failure, including a cancellation raised by the model
            port itself.
        asyncio.CancelledError
            When the calling task is being cancelled.
        """
        api_key = self._credentials.resolve()
        if not api_key:
            missing = f"{self._credentials.description} is not set."
            logger.error("Error generating prospect data: %s", missing)
            self._transition(CallState.FAILED)
            raise CredentialError(
                CREDENTIAL_MESSAGE.format(error=missing),
                attempts=0,
                details={"credential_source": self._credentials.description},
            )

        self._transition(CallState.BUILDING)
        prompt = build_prompt(inputs)
        options = InvocationOptions(
            enable_search_grounding=self._model_config.enable_search_grounding,
            model=self._model_config.model,
            api_key=api_key,
        )

        state = RetryState()

        async def _invoke() -> RawModelResponse:
            self._transition(CallState.ATTEMPTING, state.attempt)
            return await self._port.invoke(prompt, options)

        try:
            raw = await self._engine.run(_invoke, self._classifier.is_transient, state)
        except asyncio.CancelledError as exc:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                # The caller cancelled us (e.g. asyncio.timeout); let it propagate.
                logger.info("Prospect data request cancelled by caller")
                self._transition(CallState.FAILED)
                raise
            logger.error("Prospect data request was cancelled")
            self._transition(CallState.FAILED)
            raise FatalRequestError(
                CANCELLED_MESSAGE, attempts=state.attempt
            ) from exc
        except Exception as exc:
            error = self._classify_failure(exc, state)
            logger.error("Error generating prospect data: %s", exc)
            self._transition(CallState.FAILED)
            raise error from exc

        report = normalize_response(raw)
        self._transition(CallState.SUCCEEDED, state.attempt)
        return report

    # -- internal helpers -----------------------------------------------------

    def _classify_failure(
        self, error: Exception, state: RetryState
    ) -> ProspectingError:
        kind = self._classifier.classify(error)
        details = {
            "error_type": type(error).__name__,
            "status_code": getattr(error, "status_code", None),
            "backoff_delays": list(state.delays),
        }
        if kind is ErrorKind.CREDENTIAL:
            return CredentialError(
                CREDENTIAL_MESSAGE.format(error=error), state.attempt, details
            )
        if kind is ErrorKind.TRANSIENT:
            return TransientServiceError(
                OVERLOADED_MESSAGE.format(error=error), state.attempt, details
            )
        return FatalRequestError(
            FATAL_MESSAGE.format(error=error), state.attempt, details
        )

    async def _backoff(self, delay: float) -> None:
        self._transition(CallState.BACKING_OFF)
        await self._sleep(delay)

    @staticmethod
    def _transition(state: CallState, attempt: int | None = None) -> None:
        if attempt is None:
            logger.debug("Prospect request -> %s", state.value)
        else:
            logger.debug("Prospect request -> %s (attempt %d)", state.value, attempt)

    def __repr__(self) -> str:
        return (
            f"ProspectRequestOrchestrator(port={self._port!r}, "
            f"credentials={self._credentials!r}, "
            f"classifier={self._classifier!r})"
        )


def build_default_orchestrator(
    model_config: ModelConfig | None = None,
    retry_config: RetryConfig | None = None,
    classifier: ErrorClassifier | None = None,
) -> ProspectRequestOrchestrator:
    """An orchestrator wired to Gemini with the key read from the environment."""
    from prospect_agent.infrastructure.llm.gemini import GeminiModelPort

    model_config = model_config or ModelConfig()
    return ProspectRequestOrchestrator(
        port=GeminiModelPort(default_model=model_config.model),
        credentials=EnvironmentCredentialProvider(model_config.credential_env_var),
        classifier=classifier,
        retry_config=retry_config,
        model_config=model_config,
    )


async def generate_prospect_data(
    inputs: ProspectInput,
    orchestrator: ProspectRequestOrchestrator | None = None,
) -> ProspectReport:
    """Generate a report with *orchestrator*, or a default Gemini one."""
    orchestrator = orchestrator or build_default_orchestrator()
    return await orchestrator.generate_prospect_data(inputs)
