"""Recursive directory copy used to lay the template down on disk."""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def mirror(source_dir: Path, dest_dir: Path) -> None:
    """Copy every file and subdirectory of source_dir into dest_dir.

    Creates dest_dir (and parents) when missing. Regular files are copied
    byte-for-byte and overwrite same-named files already in dest_dir.
    File metadata and permissions are not carried over.

    Raises:
        OSError: If an entry cannot be read or written. Files copied before
                 the failure are left in place.
    """
    dest_dir.mkdir(parents=True, exist_ok=True)

    for src in sorted(source_dir.iterdir()):
        dest = dest_dir / src.name
        if src.is_dir():
            mirror(src, dest)
        else:
            shutil.copyfile(src, dest)
            logger.debug("Copied %s -> %s", src, dest)
