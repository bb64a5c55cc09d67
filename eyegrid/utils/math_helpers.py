import math


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b by factor t (0.0-1.0)."""
    return a + (b - a) * t


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value between min_val and max_val."""
    return max(min_val, min(max_val, value))


def map_range(value: float, in_range: tuple, out_range: tuple,
              clamped: bool = False) -> float:
    """Re-map value from in_range onto out_range linearly.

    Output ranges may be descending. With clamped=True the result is
    constrained to the output range.
    """
    in_lo, in_hi = in_range
    out_lo, out_hi = out_range
    t = (value - in_lo) / (in_hi - in_lo)
    result = lerp(out_lo, out_hi, t)
    if clamped:
        result = clamp(result, min(out_lo, out_hi), max(out_lo, out_hi))
    return result


def distance(a: tuple, b: tuple) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])
