"""
Setup event log.

Writes one JSON object per line. The global `telemetry` instance stays
silent until init() gives it a file, so tests and the demo can run without
one.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


@dataclass
class TelemetryLogger:
    path: Optional[Path] = None
    enabled: bool = True
    _events_written: int = 0

    def init(self, path: Path) -> None:
        """Start appending to path; an existing file is kept."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=True)
        self.path = path
        self.log("telemetry_init", file=str(path))

    def close(self) -> None:
        self.path = None

    @property
    def active(self) -> bool:
        return self.enabled and self.path is not None

    def log(self, event: str, **fields: Any) -> None:
        if not self.active:
            return
        line = json.dumps(
            {"ts": time.strftime("%Y-%m-%dT%H:%M:%S"), "event": event, **fields},
            ensure_ascii=False,
            default=str,
        )
        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError:
            # Write failures are dropped
            return
        self._events_written += 1

    def log_setup(self, enemy_type: int, category: str, level: int, valid: bool, allied: bool) -> None:
        """Record the outcome of one EnemySetup.initialize() call."""
        self.log("enemy_setup", enemy_type=enemy_type, category=category, level=level,
                 valid=valid, allied=allied)

    @property
    def events_written(self) -> int:
        return self._events_written


telemetry = TelemetryLogger()
