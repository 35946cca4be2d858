"""Calculator configuration limits and validation."""

from .errors import ConfigError

MIN_BASE = 2
MAX_BASE = 36
DEFAULT_BASE = 10


def validate_base(base):
    """Return *base* if it is an integer in MIN_BASE..MAX_BASE.

    Raises:
        ConfigError otherwise; out-of-range values are never clamped.
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise ConfigError(f"Base must be an integer, got {base!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise ConfigError(
            f"Base must be {MIN_BASE}-{MAX_BASE}, got {base}")
    return base
