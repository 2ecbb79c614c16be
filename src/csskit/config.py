from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CsskitConfig:
    log_level: str = "WARNING"
