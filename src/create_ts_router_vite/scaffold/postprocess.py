"""Post-copy fixes applied to a freshly mirrored project.

Two independent steps:
  - activate_gitignore(): `_gitignore` → `.gitignore`.
  - update_manifest(): set the `name` field of package.json.
"""

import json
import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

GITIGNORE_TEMPLATE_NAME = "_gitignore"
GITIGNORE_NAME = ".gitignore"
MANIFEST_NAME = "package.json"


class ManifestParseError(ValueError):
    """package.json exists but does not hold a JSON object."""


def activate_gitignore(project_dir: Path) -> bool:
    """Copy `_gitignore` to `.gitignore` and remove the template file.

    A failed removal is logged and ignored; the leftover file is harmless.

    Returns:
        True if `.gitignore` was written, False if the template has none.
    """
    template_path = project_dir / GITIGNORE_TEMPLATE_NAME
    if not template_path.is_file():
        return False

    shutil.copyfile(template_path, project_dir / GITIGNORE_NAME)
    try:
        template_path.unlink()
    except OSError as e:
        logger.warning("Could not remove %s: %s", template_path, e)
    return True


def update_manifest(project_dir: Path, project_name: str) -> bool:
    """Overwrite the `name` field of package.json, keeping every other field.

    Returns:
        True if the manifest was rewritten, False if there is none.

    Raises:
        ManifestParseError: If the file is not a JSON object. Nothing is written.
    """
    manifest_path = project_dir / MANIFEST_NAME
    if not manifest_path.is_file():
        return False

    text = manifest_path.read_text(encoding="utf-8")
    try:
        manifest = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestParseError(f"Invalid JSON in {manifest_path}: {e}") from e
    if not isinstance(manifest, dict):
        raise ManifestParseError(f"Expected a JSON object in {manifest_path}")

    manifest["name"] = project_name
    manifest_path.write_text(
        json.dumps(manifest, indent=2, ensure_ascii=False), encoding="utf-8"
    )
    logger.debug("Set %s name to %r", manifest_path, project_name)
    return True


def postprocess(project_dir: Path, project_name: str) -> None:
    """Run every post-copy step on project_dir."""
    activate_gitignore(project_dir)
    update_manifest(project_dir, project_name)
