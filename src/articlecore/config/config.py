"""
Configuration management for articlecore using Pydantic.
"""

from __future__ import annotations

import logging
import re
import threading
from pathlib import Path
from typing import Any, ClassVar, List, Literal, cast

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from articlecore import constants

# --- Setup Logging ---
log = logging.getLogger(__name__)

# --- Nested Configuration Models ---


class ScoringConfig(BaseModel):
    """Empirically tuned weights of the gravity scoring model."""

    boost_score: float = Field(default=30.0, description="Base boost for nodes preceded by substantial siblings.")
    parent_node: float = Field(default=1.0, description="Share of a candidate's score given to its parent.")
    parent_parent_node: float = Field(default=0.4, description="Share of a candidate's score given to its grandparent.")
    bottom_negativescore_nodes: float = Field(
        default=0.25, ge=0.0, le=1.0, description="Tail fraction of candidates that receive a negative boost."
    )
    node_count_threshold: int = Field(default=15, description="Candidate count above which the tail penalty applies.")
    negative_score_threshold: float = Field(default=40.0, description="Accumulated penalty that triggers the clamp.")
    negative_score_boost: float = Field(default=5.0, description="Boost used once the penalty is clamped.")
    boost_max_steps_from_node: int = Field(default=3, description="Preceding same-tag siblings inspected for boosting.")
    boost_min_stopword_count: int = Field(default=5, description="Stop words a sibling needs to trigger a boost.")
    min_stopword_count: int = Field(default=2, description="Candidates need strictly more net stop words than this.")
    sibling_baseline_weight: float = Field(default=0.3, description="Fraction of the baseline a sibling must exceed.")
    fallback_div_count: int = Field(default=5, description="Leading divs inspected when no div looks like an article.")


class SignatureConfig(BaseModel):
    """Markup that identifies article containers, swappable for site tuning."""

    candidate_tags: List[str] = Field(
        default_factory=lambda: list(constants.CANDIDATE_TAGS),
        description="Tags whose text is inspected when looking for the article body.",
    )
    article_div_words: List[str] = Field(
        default_factory=lambda: list(constants.ARTICLE_DIV_WORDS),
        description="Whole-word id/class tokens that make a div a candidate.",
    )
    article_div_class_pattern: str = Field(
        default=constants.ARTICLE_DIV_CLASS_PATTERN, description="Regex searched in div classes."
    )
    article_itemprops: List[str] = Field(
        default_factory=lambda: list(constants.ARTICLE_ITEMPROPS),
        description="itemprop values that always join the candidate set.",
    )
    article_body_tags: List[constants.ArticleBodyTag] = Field(
        default_factory=lambda: list(constants.ARTICLE_BODY_TAGS),
        description="Signatures that give matching nodes a head start.",
    )

    @field_validator("article_div_class_pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regular expression {v!r}: {e}") from e
        return v

    @field_validator("article_body_tags")
    @classmethod
    def validate_signatures(cls, v: List[constants.ArticleBodyTag]) -> List[constants.ArticleBodyTag]:
        """Reject empty signatures and ``re:`` values that do not compile."""
        for signature in v:
            if not signature.tag and not signature.attributes():
                raise ValueError("a signature needs a tag or at least one attribute")
            for value in signature.attributes().values():
                if value.startswith("re:"):
                    try:
                        re.compile(value[3:])
                    except re.error as e:
                        raise ValueError(f"invalid regular expression {value!r}: {e}") from e
        return v


class CleanerConfig(BaseModel):
    """Signature tables used by the document cleaner, swappable for site tuning."""

    remove_nodes_pattern: str = constants.REMOVE_NODES_PATTERN
    related_nodes_pattern: str = constants.RELATED_NODES_PATTERN
    consent_pattern: str = constants.CONSENT_PATTERN
    caption_pattern: str = constants.CAPTION_PATTERN
    google_pattern: str = constants.GOOGLE_PATTERN
    entries_pattern: str = constants.ENTRIES_PATTERN
    facebook_pattern: str = constants.FACEBOOK_PATTERN
    facebook_broadcasting_pattern: str = constants.FACEBOOK_BROADCASTING_PATTERN
    twitter_pattern: str = constants.TWITTER_PATTERN
    bad_tags: List[str] = Field(default_factory=lambda: list(constants.BAD_TAGS))
    keep_tags: List[str] = Field(default_factory=lambda: list(constants.KEEP_TAGS))

    @field_validator(
        "remove_nodes_pattern",
        "related_nodes_pattern",
        "consent_pattern",
        "caption_pattern",
        "google_pattern",
        "entries_pattern",
        "facebook_pattern",
        "facebook_broadcasting_pattern",
        "twitter_pattern",
    )
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Ensure every pattern compiles."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regular expression {v!r}: {e}") from e
        return v


class ExtractionConfig(BaseModel):
    """Configuration for article body extraction."""

    language: str = Field(default="en", description="Default two-letter language code.")
    parser: Literal["lxml", "html.parser"] = Field(
        default="lxml", description="BeautifulSoup tree builder used to parse documents."
    )
    clean_top_node: bool = Field(default=True, description="Run the document cleaner on the composite node.")
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    signatures: SignatureConfig = Field(default_factory=SignatureConfig)
    cleaner: CleanerConfig = Field(default_factory=CleanerConfig)

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Normalise language codes such as ``en-US`` to ``en``."""
        v = v.strip().lower()
        if not v:
            raise ValueError("language must not be empty")
        return v.split("-")[0].split("_")[0][:2]


class MonitoringConfig(BaseModel):
    """Configuration for logging and metrics."""

    log_level: str = Field(default="INFO", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(default=None, description="Path to log file. If None, logs to console.")
    metrics_enabled: bool = Field(default=True, description="Record Prometheus metrics for extractions.")

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    project_name: str = "articlecore"
    version: str = "0.1.0"
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="ARTICLECORE_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    paths_to_check = [
        current_dir / "articlecore.yaml",
        current_dir / "articlecore.yml",
    ]
    for path in paths_to_check:
        if path.exists():
            return path
    return None


# --- Lazy Configuration Loader ---


class LazyConfig:
    """
    A proxy for the Config object that delays its loading and validation
    until an attribute is first accessed.
    """

    _config: ClassVar[Config | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __getattr__(self, name: str) -> Any:
        if self.__class__._config is None:
            with self.__class__._lock:
                if self.__class__._config is None:
                    self.__class__._config = self._load_config_with_fallback()
        return getattr(self.__class__._config, name)

    def _load_config_with_fallback(self) -> Config:
        """Load configuration from file or fall back to defaults."""
        config_path = find_config_file()
        if config_path:
            try:
                log.info("Lazy loading configuration from: %s", config_path)
                return Config.from_yaml(config_path)
            except (ValidationError, FileNotFoundError, yaml.YAMLError) as e:
                log.error(
                    "Failed to load or validate configuration from '%s': %s. Falling back to default settings.",
                    config_path,
                    e,
                    exc_info=log.getEffectiveLevel() <= logging.DEBUG,
                )
        else:
            log.info("No config file found. Using default settings for lazy load.")

        try:
            return Config()
        except ValidationError as e:
            log.critical("FATAL: Default configuration is invalid: %s", e, exc_info=True)
            raise RuntimeError(f"Default configuration is invalid, cannot start: {e}") from e


settings: "Config" = cast("Config", LazyConfig())
