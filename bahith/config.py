"""
Configuration for Bahith library.

Settings are read from environment variables prefixed with ``BAHITH_``
(for example ``BAHITH_MIN_SCORE=0.4``) and can be overridden in code
with :func:`configure`.
"""

from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from bahith.exceptions import ConfigurationError


class BahithSettings(BaseSettings):
    """
    Library-wide defaults for searching and ranking.

    Attributes:
        default_limit: Maximum results returned by a search
        min_score: Default score floor for search results
        suggest_limit: Maximum suggestions returned for autocomplete
        suggest_min_score: Score floor used by autocomplete
        suggest_min_length: Shortest partial query that produces suggestions
        over_fetch_factor: Per-catalog over-fetch multiplier before re-ranking
        boost_exact_matches: Whether the ranker rewards exact matches
        exact_match_bonus: Bonus added to exact matches
        boost_reciters: Category bonus for reciters
        boost_surahs: Category bonus for surahs
        boost_quran_terms: Category bonus for Quranic terms
        penalize_fuzzy: Fraction removed from fuzzy matches (0.2 keeps 80%)
        language_weight: Bonus when query and result share a script
        popularity_weight: Multiplier applied to the category popularity table
        log_level: Log level used by ``configure_logging`` helpers
    """

    model_config = SettingsConfigDict(
        env_prefix="BAHITH_",
        extra="ignore",
        validate_assignment=True,
    )

    default_limit: int = Field(default=10, ge=1)
    min_score: float = Field(default=0.3, ge=0.0, le=1.0)

    suggest_limit: int = Field(default=5, ge=1)
    suggest_min_score: float = Field(default=0.2, ge=0.0, le=1.0)
    suggest_min_length: int = Field(default=2, ge=1)

    over_fetch_factor: int = Field(default=2, ge=1)

    boost_exact_matches: bool = True
    exact_match_bonus: float = Field(default=0.2, ge=0.0, allow_inf_nan=False)
    boost_reciters: float = Field(default=0.1, ge=0.0, allow_inf_nan=False)
    boost_surahs: float = Field(default=0.08, ge=0.0, allow_inf_nan=False)
    boost_quran_terms: float = Field(default=0.05, ge=0.0, allow_inf_nan=False)
    penalize_fuzzy: float = Field(default=0.2, ge=0.0, le=1.0)
    language_weight: float = Field(default=0.15, ge=0.0, allow_inf_nan=False)
    popularity_weight: float = Field(default=0.1, ge=0.0, allow_inf_nan=False)

    log_level: str = "WARNING"


_settings: BahithSettings | None = None


def get_settings() -> BahithSettings:
    """
    Get the process-wide settings instance.

    Built from the environment on first use and reused afterwards.

    Raises:
        ConfigurationError: If an environment value is invalid
    """
    global _settings
    if _settings is None:
        _settings = _build()
    return _settings


def configure(**overrides: Any) -> BahithSettings:
    """
    Replace the process-wide settings with one built from ``overrides``.

    Unspecified values still come from the environment.

    Example:
        configure(min_score=0.4, default_limit=20)

    Raises:
        ConfigurationError: If an override is unknown or invalid
    """
    global _settings
    unknown = set(overrides) - set(BahithSettings.model_fields)
    if unknown:
        name = sorted(unknown)[0]
        raise ConfigurationError(f"Unknown setting: {name}", setting_name=name)

    _settings = _build(**overrides)
    return _settings


def reset_settings() -> None:
    """Forget configured overrides; the next get_settings() re-reads the environment."""
    global _settings
    _settings = None


def _build(**overrides: Any) -> BahithSettings:
    try:
        return BahithSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid Bahith settings: {e}") from e
