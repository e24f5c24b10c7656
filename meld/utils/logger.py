import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(meld_home: Path | None = None) -> None:
    """Configure unified meld logging.

    Args:
        meld_home: Path to meld home directory. If None, derived from environment.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if meld_home is None:
        from ..api.config.get_home_dir import get_home_dir

        meld_home = get_home_dir()

    meld_home.mkdir(parents=True, exist_ok=True)
    log_file = meld_home / "meld.log"

    root_logger = logging.getLogger("meld")
    root_logger.setLevel(logging.INFO)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
