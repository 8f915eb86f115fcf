import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from src.config import LOGS_DIR


# ============================================================================
# LOGGING
# ============================================================================

LOG_FORMAT = "%(asctime)s - [%(levelname)s] - %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def setup_logging(name: str) -> logging.Logger:
    """Configures a standard logger."""
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT
    )
    return logging.getLogger(name)


def setup_file_logging(prefix: str, logs_dir: Optional[Path] = None) -> Path:
    """Add a timestamped file handler to the root logger.

    Console logging stays in place; every record is duplicated to
    ``<logs_dir>/<prefix>_<timestamp>.log``.

    Args:
        prefix: File name prefix, usually the demo name.
        logs_dir: Target directory. Defaults to LOGS_DIR from config.

    Returns:
        Path of the log file.
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = (logs_dir or LOGS_DIR) / f"{prefix}_{timestamp}.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)

    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setLevel(logging.INFO)
    fh.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    logging.getLogger().addHandler(fh)

    return log_file


# ============================================================================
# OUTPUT FILES
# ============================================================================

def write_text_output(content: str, output_path: Path) -> Path:
    """Write a text artifact, creating parent directories as needed.

    An existing file at ``output_path`` is overwritten.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    return output_path
