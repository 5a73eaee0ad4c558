"""Default configuration values for Word Lookup."""

from .config import LookupConfig


def create_default_config(**overrides) -> LookupConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        LookupConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            request_timeout=5.0,
            initial_word="rook"
        )
    """
    return LookupConfig(**overrides)
