from services.advisory_service.core.connectors.anthropic_generator import (
    AnthropicTextGenerator,
)
from services.advisory_service.core.connectors.common import AdvisoryTextGenerator

__all__ = ["AdvisoryTextGenerator", "AnthropicTextGenerator"]
