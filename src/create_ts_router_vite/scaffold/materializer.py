"""Project creation — validate the target, copy the template, patch the result.

Key function: materialize().
"""

import logging
from pathlib import Path

from .mirror import mirror
from .postprocess import postprocess

logger = logging.getLogger(__name__)


class ProjectExistsError(FileExistsError):
    """The target project path is already taken."""


def validate_project_name(project_name: str, parent_dir: Path) -> Path:
    """Return the target path for project_name, refusing names already on disk.

    Any entry counts, including files and dangling symlinks.

    Raises:
        ValueError: If project_name is blank.
        ProjectExistsError: If the target already exists.
    """
    if not project_name.strip():
        raise ValueError("Project name must not be empty.")

    target = parent_dir / project_name
    if target.exists() or target.is_symlink():
        raise ProjectExistsError(f"Directory '{project_name}' already exists.")
    return target


def materialize(
    project_name: str, template_dir: Path, parent_dir: Path | None = None
) -> Path:
    """Create parent_dir/project_name as a patched copy of template_dir.

    Args:
        project_name: Directory name, also written to package.json.
        template_dir: Template tree to copy. Never modified.
        parent_dir: Where to create the project. Defaults to the current
                    working directory.

    Returns:
        Path of the new project directory.

    Raises:
        ProjectExistsError: Target exists; nothing was written.
        FileNotFoundError: template_dir is missing; nothing was written.
        ManifestParseError: The copied package.json is malformed.
        OSError: Copy failures. Partially copied files are not removed.
    """
    if parent_dir is None:
        parent_dir = Path.cwd()

    target = validate_project_name(project_name, parent_dir)
    if not template_dir.is_dir():
        raise FileNotFoundError(f"Template directory not found: {template_dir}")

    target.mkdir(parents=True)
    mirror(template_dir, target)
    postprocess(target, project_name)

    logger.info("Created project %s from %s", target, template_dir)
    return target
