from services.entity_store_service.core.utils.sample_data import build_sample_snapshot

__all__ = ["build_sample_snapshot"]
