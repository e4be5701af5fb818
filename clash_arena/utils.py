"""
Shared utilities for the Clash Arena results tracker.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import logging
import re
import shutil
import tempfile
from pathlib import Path

# Anything that is not a plain ASCII letter or digit is replaced in file names
UNSAFE_FILENAME_RE = re.compile(r"[^a-z0-9]", re.IGNORECASE)


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# --- File Operations ---
def atomic_write_text(text: str, path: Path, suffix: str = ".tmp") -> None:
    """
    Write text to a file atomically using a temporary file.

    This prevents a half-written file if the write is interrupted.

    Args:
        text: Content to write
        path: Destination path
        suffix: Suffix for the temporary file
    """
    logger = setup_logging(__name__)

    path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            encoding='utf-8',
            delete=False,
            suffix=suffix,
            dir=path.parent  # Same filesystem for atomic move
        ) as tmp:
            tmp.write(text)
            tmp_path = Path(tmp.name)

        shutil.move(str(tmp_path), str(path))
        logger.debug(f"Atomically wrote {len(text)} characters to {path}")

    except Exception:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise


def safe_filename(name: str) -> str:
    """Replace every character that is not a letter or digit with an underscore."""
    return UNSAFE_FILENAME_RE.sub("_", name)


__all__ = [
    # Logging
    'setup_logging',
    # File operations
    'atomic_write_text',
    'safe_filename',
]
