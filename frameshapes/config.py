"""Report formatting configuration."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class ReportConfig:
    """Knobs for the textual scene report."""

    precision: int = 6
    indent: str = "  "

    def __post_init__(self) -> None:
        if self.precision < 1:
            raise ValueError(f"precision must be at least 1, got {self.precision}")


_REPORT_CONFIG = ReportConfig()


def get_report_config() -> ReportConfig:
    return copy.deepcopy(_REPORT_CONFIG)


def set_report_config(config: ReportConfig) -> None:
    global _REPORT_CONFIG
    _REPORT_CONFIG = copy.deepcopy(config)
