from __future__ import annotations

from logger import get_logger
from services.advisory_service.core.config import (
    AdvisoryServiceConfig,
    get_advisory_config,
)
from services.advisory_service.core.connectors import (
    AdvisoryTextGenerator,
    AnthropicTextGenerator,
)
from services.advisory_service.core.utils import build_advisory_prompt
from services.projection_service import SystemSnapshot

UNCONFIGURED_MESSAGE = "AI insights unavailable. Please configure ANTHROPIC_API_KEY."
ERROR_MESSAGE = "Error generating insights. Please try again later."
EMPTY_MESSAGE = "No insights generated."


class AdvisoryService:
    """
    Boundary to the external advisory text generator.

    ``summarize`` never raises: a missing credential, a transport error or an
    empty answer each map to a fixed informational string.
    """

    def __init__(
        self,
        generator: AdvisoryTextGenerator | None = None,
        config: AdvisoryServiceConfig | None = None,
        low_volume_threshold: float = 0.2,
    ):
        self._logger = get_logger(__name__)
        self._config = config or get_advisory_config()
        self._generator = generator
        self._low_volume_threshold = low_volume_threshold

    def summarize(self, snapshot: SystemSnapshot) -> str:
        try:
            generator = self._generator or self._build_default_generator()
        except Exception as e:
            self._logger.error("Could not initialise advisory generator: %s", e)
            return ERROR_MESSAGE

        if generator is None:
            self._logger.warning("Advisory API key is missing, insights are disabled.")
            return UNCONFIGURED_MESSAGE

        prompt = build_advisory_prompt(snapshot, self._low_volume_threshold)
        self._logger.debug("Advisory prompt: %s", prompt)

        try:
            text = generator.generate(prompt)
        except Exception as e:
            self._logger.error("Advisory generator error: %s", e)
            return ERROR_MESSAGE

        if not text or not text.strip():
            self._logger.info("Advisory generator returned no text.")
            return EMPTY_MESSAGE

        self._logger.info("Advisory summary generated (%d characters).", len(text))
        return text.strip()

    def _build_default_generator(self) -> AdvisoryTextGenerator | None:
        if not self._config.is_configured:
            return None
        return AnthropicTextGenerator(
            api_key=self._config.anthropic_api_key.get_secret_value(),  # type: ignore[union-attr]
            model=self._config.advisory_model,
            max_tokens=self._config.max_tokens,
            timeout=self._config.request_timeout_seconds,
        )
