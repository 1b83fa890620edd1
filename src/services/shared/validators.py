import math


def is_blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()


def is_positive_finite(value: float | int | None) -> bool:
    if value is None or isinstance(value, bool):
        return False
    if not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0

