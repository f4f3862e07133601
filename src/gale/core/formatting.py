"""Human-readable formatting helpers."""

UNIT = 1024
UNIT_PREFIXES = "KMGTPE"


def format_bytes(size: int) -> str:
    """Format a byte count, e.g. 1536 -> "1.5 KB".

    Sizes below 1024 are printed as whole bytes.
    """
    if size < 0:
        raise ValueError(f"Byte count must be non-negative, got {size}")
    if size < UNIT:
        return f"{size} B"

    divisor, exponent = UNIT, 0
    quotient = size // UNIT
    while quotient >= UNIT and exponent < len(UNIT_PREFIXES) - 1:
        divisor *= UNIT
        exponent += 1
        quotient //= UNIT

    return f"{size / divisor:.1f} {UNIT_PREFIXES[exponent]}B"
