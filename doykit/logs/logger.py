# doykit/logs/logger.py

"""
Logger factory for doykit runs.

``get_logger`` returns a logger under the ``doykit`` namespace that writes to
the console and, when ``log_dir`` is given, to a timestamped ``.log`` file.
Calling it again with the same names reuses the logger: the console handler
is attached once, and a file handler is added the first time a ``log_dir``
is supplied.
"""

import logging
import os
from datetime import datetime
from typing import Optional

from ..config import DoyConfig, DEFAULT_CONFIG

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(
    run_name: str,
    scenario: Optional[str] = None,
    log_dir: Optional[str] = None,
    level: Optional[str] = None,
    config: Optional[DoyConfig] = None,
) -> logging.Logger:
    """
    Create or fetch a run logger.

    Parameters
    ----------
    run_name : str
        Name of the run; becomes part of the logger name and log file name.
    scenario : str, optional
        Extra qualifier (dataset, experiment...) appended to the name.
    log_dir : str, optional
        Directory for the log file. No file handler is attached if omitted.
    level : str, optional
        Logging level name. Overrides ``config.log_level`` when given.
    config : DoyConfig, optional
        Supplies the default log level (default: ``DEFAULT_CONFIG``).

    Returns
    -------
    logging.Logger
    """
    config = config or DEFAULT_CONFIG
    parts = [run_name] + ([scenario] if scenario else [])
    logger = logging.getLogger("doykit." + ".".join(parts))
    logger.setLevel((level or config.log_level).upper())
    # handlers below already reach the console; avoid a second copy via root
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)
    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    console_handlers = [h for h in logger.handlers if h not in file_handlers
                        and isinstance(h, logging.StreamHandler)]

    if not console_handlers:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)

    if log_dir and not file_handlers:
        os.makedirs(log_dir, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"{'_'.join(parts)}_{stamp}.log"
        file_handler = logging.FileHandler(os.path.join(log_dir, filename))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
