"""Settings of the text shell. Built from the command line arguments."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ShellConfig(BaseModel):
    white_name: Optional[str] = None
    black_name: Optional[str] = None
    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    use_color: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise InvalidRequestError(
                f"Unknown log level {value!r}. Pick one from {', '.join(LOG_LEVELS)}."
            )
        return level

    def configure_logging(self) -> None:
        """Logs go to a file if one is given, otherwise to stderr (so they do not mix with the board on stdout)."""
        logging.basicConfig(
            level=getattr(logging, self.log_level),
            filename=self.log_file,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
