"""Run configuration: YAML file plus CLI overrides."""

from .loader import CONFIG_SCHEMA, load_config, parse_config
from .models import EXIT_POLICIES, REPORT_FORMATS, ReportConfig, RunConfig, RunOverrides

__all__ = [
    "CONFIG_SCHEMA",
    "EXIT_POLICIES",
    "REPORT_FORMATS",
    "ReportConfig",
    "RunConfig",
    "RunOverrides",
    "load_config",
    "parse_config",
]
