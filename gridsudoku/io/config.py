"""Solver options, optionally read from a YAML file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from ..core.errors import ParseError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SolverConfig:
    strategy: str = "smart"
    # 0 means enumerate every solution
    max_solutions: int = 1
    log_level: str = "WARNING"

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    def override(self, **changes: Any) -> "SolverConfig":
        """Copy with every change that is not None applied."""
        return _checked(replace(self, **{k: v for k, v in changes.items() if v is not None}))


def _checked(config: SolverConfig) -> SolverConfig:
    if not isinstance(config.strategy, str) or not config.strategy:
        raise ParseError(f"strategy must be a non-empty string, got {config.strategy!r}")
    if isinstance(config.max_solutions, bool) or not isinstance(config.max_solutions, int) or config.max_solutions < 0:
        raise ParseError(f"max_solutions must be a non-negative integer, got {config.max_solutions!r}")
    level = str(config.log_level).upper()
    if level not in LOG_LEVELS:
        raise ParseError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {config.log_level!r}")
    if level != config.log_level:
        config = replace(config, log_level=level)
    return config


def load_config(path: Optional[str | Path]) -> SolverConfig:
    """Read options from ``path``; ``None`` gives the defaults."""
    if path is None:
        return SolverConfig()
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ParseError(f"invalid YAML in {path}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ParseError(f"config {path} must be a mapping")
    known = {f.name for f in fields(SolverConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ParseError(f"unknown config keys in {path}: {', '.join(map(str, unknown))}")
    return _checked(SolverConfig(**data))
