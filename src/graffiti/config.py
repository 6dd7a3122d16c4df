from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GraffitiConfig:
    root_name: str = ":root"
    encoding: str = "utf-8"  # used when reading stylesheet files
    log_level: str = "WARNING"
