from services.advisory_service.core.utils.prompt import build_advisory_prompt

__all__ = ["build_advisory_prompt"]
