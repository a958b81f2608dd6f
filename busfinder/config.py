"""Configuration utilities.

Central place to load environment driven settings (timetable override, tick interval, output paths).
Avoids scattering os.getenv calls around the codebase.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env once on module import
load_dotenv()


def _optional_path(value: str | None) -> Path | None:
    return Path(value) if value else None


@dataclass(slots=True)
class Settings:
    timetable_file: Path | None = _optional_path(os.getenv("TIMETABLE_FILE"))
    tick_seconds: int = int(os.getenv("TICK_SECONDS", "1"))
    output_html: Path = Path(os.getenv("OUTPUT_HTML", "timetable.html"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def timetable_overridden(self) -> bool:
        return self.timetable_file is not None


settings = Settings()
