"""
Logging console + fichier pour le parser
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from .config import PROGRAM_NAME

PACKAGE_LOGGER = 'outer_worlds_save'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def log_file_name(now: Optional[datetime] = None) -> str:
    """{programme}-{YYYY-MM-DD-HH-MM-SS}.txt"""
    now = now or datetime.now()
    return f"{PROGRAM_NAME}-{now:%Y-%m-%d-%H-%M-%S}.txt"


def setup_logging(log_dir: Path, level: int = logging.DEBUG) -> Tuple[logging.Logger, Path]:
    """
    Configure le logger du package (console + fichier)

    Returns:
        (logger, log_path): Logger du package et chemin absolu du fichier de log
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = (log_dir / log_file_name()).resolve()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Évite les handlers en double si setup_logging est rappelé
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in (logging.FileHandler(log_path, encoding='utf-8'), logging.StreamHandler(sys.stdout)):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Log file: {log_path}")

    return logger, log_path
