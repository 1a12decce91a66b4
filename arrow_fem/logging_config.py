"""
Logging Configuration
Sets up the package logger for scripts, demos and the API.

What arrow_fem logs, by level:
    DEBUG    per-stage values of analyze() (EI, DOF counts, axial factor)
    INFO     sweep summaries and rejected API requests
    WARNING  ComputationWarning messages from the eigen solve
"""
import logging
import sys
from typing import Optional, TextIO


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configures the logger for the 'arrow_fem' namespace.

    Args:
        level: Logging level. The default shows only numerical warnings;
            DEBUG traces every analysis stage.
        log_file: Optional path to save logs to a file.
        stream: Console stream, stderr by default so printed results stay clean.
    """
    logger = logging.getLogger("arrow_fem")
    logger.setLevel(level)

    # repeated calls replace our handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized at %s.", logging.getLevelName(level))
    return logger
