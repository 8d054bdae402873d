import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

VERSION_ENV_VAR = "FSTABKIT_VERSION"


def get_version() -> str:
    """Resolve the package version.

    The environment variable wins so that packagers can stamp a build; otherwise
    the version.txt shipped next to this module is used.
    """
    env_version = os.environ.get(VERSION_ENV_VAR)
    if env_version:
        return env_version

    version_file = Path(__file__).absolute().parent / "version.txt"
    try:
        return version_file.read_text().strip()
    except OSError:
        logger.info(f"Could not read {version_file}", exc_info=True)

    # an unknown version must never break the CLI
    return "unknown"


__version__ = get_version()
