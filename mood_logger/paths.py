"""
Resolution of the database file location.
"""

import logging
import os
from pathlib import Path

import platformdirs

APP_NAME = "mood-logger"
DEFAULT_DB_NAME = "mood.db"

logger = logging.getLogger(__name__)


class DataDirError(RuntimeError):
    """Raised when no per-user data directory can be determined."""


def resolve_dbpath(dbpath: str | None = None) -> Path:
    """
    Work out which database file to use.

    Args:
        dbpath: An explicit, already validated path, or None for the default

    Returns:
        The explicit path verbatim, or ``mood.db`` inside the per-user
        application data directory (created if missing)

    Raises:
        DataDirError: If no explicit path was given and the user's data
            directory cannot be resolved or created
    """
    if dbpath is not None:
        return Path(dbpath)

    app_dir = platformdirs.user_data_dir(APP_NAME, appauthor=False)
    # expanduser leaves "~" in place when the home directory is unknown
    if not app_dir or not os.path.isabs(app_dir):
        raise DataDirError("can't resolve dbpath. specify --dbpath option")

    data_dir = Path(app_dir)
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DataDirError(
            f"can't create data directory {data_dir}: {e}. specify --dbpath option"
        ) from e
    logger.debug("Using default data directory %s", data_dir)
    return data_dir / DEFAULT_DB_NAME
