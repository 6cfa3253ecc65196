"""Application base directory resolution."""

import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from .exceptions import AppDirError

logger = logging.getLogger(__name__)

APP_DIR_ENV = "MONOCHROME_APP_DIR"

BACKGROUNDS_DIRNAME = "backgrounds"


def resolve_app_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    """
    Find the directory the application runs from.

    Order of precedence:
        1. The MONOCHROME_APP_DIR environment variable
        2. The folder of the executable, for frozen (bundled) builds
        3. The folder of the launched script

    Raises:
        AppDirError: if none of these can be determined
    """
    env = os.environ if env is None else env

    override = env.get(APP_DIR_ENV)
    if override:
        return Path(override).expanduser().absolute()

    if getattr(sys, "frozen", False):
        executable = sys.executable
    else:
        executable = sys.argv[0] if sys.argv else ""

    if not executable:
        raise AppDirError("Cannot get app directory")

    # Resolving follows symlinked launchers back to the real install location
    try:
        app_dir = Path(executable).resolve().parent
    except (OSError, RuntimeError) as e:
        raise AppDirError(f"Cannot get app directory: {e}") from e
    logger.debug(f"Resolved app directory: {app_dir}")
    return app_dir
