"""Configuration normalization."""

from .config_resolver import DEFAULT_PLANNER_CONFIG, resolve_effective_config

__all__ = ["DEFAULT_PLANNER_CONFIG", "resolve_effective_config"]
