from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TASKS_FILE = "tasks.txt"


@dataclass(frozen=True, slots=True)
class Settings:
    tasks_file: Path = Path(DEFAULT_TASKS_FILE)
    log_level: int = logging.WARNING
    log_file: Path | None = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Settings":
        log_file = getattr(args, "log_file", None)
        return cls(
            tasks_file=Path(getattr(args, "file", DEFAULT_TASKS_FILE)).expanduser(),
            log_level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
            log_file=Path(log_file).expanduser() if log_file else None,
        )
