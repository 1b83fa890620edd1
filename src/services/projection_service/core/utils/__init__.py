from services.projection_service.core.utils.formulas import (
    PPM_CONSUMPTION_DIVISOR,
    estimate_daily_consumption,
    fill_ratio,
    is_below_threshold,
)

__all__ = [
    "PPM_CONSUMPTION_DIVISOR",
    "estimate_daily_consumption",
    "fill_ratio",
    "is_below_threshold",
]
