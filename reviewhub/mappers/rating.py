CANONICAL_SCALE = 10
GOOGLE_SCALE = 5
HOSTAWAY_SCALE = 10


def normalize_rating(raw: float | None, source_scale_max: int) -> float | None:
    """Convert a rating from a 1-5 or 1-10 source scale to the 1-10 scale.

    None means "unrated" and stays None. A true zero is a score and scales
    to zero. The result is not rounded; use round_rating for display.
    """
    if raw is None:
        return None
    if source_scale_max not in (GOOGLE_SCALE, HOSTAWAY_SCALE):
        raise ValueError(f"Unsupported rating scale: {source_scale_max}")
    return raw * (CANONICAL_SCALE / source_scale_max)


def round_rating(value: float) -> float:
    return round(value, 1)


def mean(values: list[float]) -> float:
    """Arithmetic mean, 0.0 for an empty list."""
    if not values:
        return 0.0
    return sum(values) / len(values)
