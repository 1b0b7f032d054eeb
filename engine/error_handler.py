"""
Logging and exception types for enemy setup.

Every module logs through the "enemy_setup" logger: full detail goes to a
dated file under logs/, warnings and errors also reach the console.

The exceptions cover template registration, template loading and save
files. EnemySetup.initialize itself never raises them; bad data is rejected
before it reaches the registry or the setup call.
"""
import logging
from datetime import date
from pathlib import Path
from typing import Optional

LOG_DIR = Path(__file__).resolve().parent.parent / "logs"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def _build_logger(name: str) -> logging.Logger:
    log = logging.getLogger(name)
    log.setLevel(logging.DEBUG)
    if log.handlers:
        return log

    LOG_DIR.mkdir(exist_ok=True)
    file_handler = logging.FileHandler(LOG_DIR / f"{name}_{date.today():%Y%m%d}.log", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    log.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    log.addHandler(console_handler)
    return log


logger = _build_logger("enemy_setup")


class GameError(Exception):
    """
    Base class for enemy setup errors.

    user_message is a short form suitable for printing; it defaults to the
    full message.
    """
    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message or message


class TemplateError(GameError):
    """A mobile template could not be read or registered."""


class ValidationError(TemplateError):
    """A template was well-formed but failed validate_template()."""


class SaveError(GameError):
    """An enemy save file could not be written, read or decoded."""


def log_error(error: Exception, context: str = "", user_message: Optional[str] = None) -> None:
    """Log error with its traceback under context; user_message is logged at INFO."""
    logger.error(f"Error in {context}: {type(error).__name__}: {error}", exc_info=error)
    if user_message:
        logger.info(f"{context}: {user_message}")
