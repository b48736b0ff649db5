import os

TRUE_FLAG_VALUES = {"true", "1", "yes", "on"}


def _env_flag(env_var: str, *, default: bool = False) -> bool:
    """Return the boolean value of ``env_var`` respecting common true strings."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    return value.strip().lower() in TRUE_FLAG_VALUES


def _env_choice(env_var: str, *, default: str, choices: set[str]) -> str:
    """Return the normalized value of ``env_var`` restricted to ``choices``."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized not in choices:
        allowed = ", ".join(repr(choice) for choice in sorted(choices))
        raise ValueError(f"{env_var} must be one of {allowed}")
    return normalized
