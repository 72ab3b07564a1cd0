"""Engine settings that the presentation layer may toggle at runtime."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EngineSettings:
    # Compute and emit "in check" notices after each move.
    check_warning: bool = True
    # Return candidate destinations from select().
    show_candidates: bool = True
