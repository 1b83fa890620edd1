from __future__ import annotations

import anthropic

from logger import get_logger
from services.advisory_service.core.connectors.common import AdvisoryTextGenerator


class AnthropicTextGenerator(AdvisoryTextGenerator):
    _logger = get_logger(__name__)

    def __init__(
        self,
        api_key: str,
        model: str,
        max_tokens: int = 1024,
        timeout: float = 30.0,
    ):
        self._client = anthropic.Anthropic(api_key=api_key, timeout=timeout)
        self._model = model
        self._max_tokens = max_tokens

    def generate(self, prompt: str) -> str:
        self._logger.debug("Requesting advisory text from model %s", self._model)
        response = self._client.messages.create(
            model=self._model,
            max_tokens=self._max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
        return "".join(
            block.text for block in response.content if getattr(block, "type", "") == "text"
        )
