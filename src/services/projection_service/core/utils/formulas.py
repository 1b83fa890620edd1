from typing import Iterable

import numpy as np

# production (bbl/day) x ppm -> L/day
PPM_CONSUMPTION_DIVISOR: float = 10000.0


def fill_ratio(current_volume: float, capacity: float) -> float:
    return current_volume / capacity


def is_below_threshold(ratio: float, threshold: float) -> bool:
    # Exclusive boundary: a tank exactly at the threshold is not low
    return ratio < threshold


def estimate_daily_consumption(
    production_rate: float, target_ppms: Iterable[float]
) -> float:
    """
    Estimated chemical consumption of a well in liters per day.

    The target concentrations of all active chemicals are summed before
    scaling by the production rate; chemicals are not weighted individually.
    """
    total_ppm = float(np.sum(np.fromiter(target_ppms, dtype=float)))
    return production_rate * total_ppm / PPM_CONSUMPTION_DIVISOR
