from .config import CleanerConfig, Config, ExtractionConfig, MonitoringConfig, ScoringConfig, SignatureConfig, settings

__all__ = [
    "Config",
    "ExtractionConfig",
    "ScoringConfig",
    "SignatureConfig",
    "CleanerConfig",
    "MonitoringConfig",
    "settings",
]
