"""Out-of-process setup steps run inside a new project directory.

Provides install_dependencies() (package manager install, output streamed to
the terminal) and init_git() (init, stage all, initial commit, output
captured). Neither raises on command failure: each returns a CommandResult
and the caller decides how to report it.

Every command receives the project directory through ``cwd=``; the process
working directory is never changed.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Max characters of captured stderr carried into a failure message
_STDERR_TAIL = 500


@dataclass(frozen=True)
class CommandResult:
    """Outcome of an external setup step."""

    ok: bool
    message: str = ""
    returncode: int | None = None


def install_dependencies(
    project_dir: Path, command: Sequence[str] = ("bun", "install")
) -> CommandResult:
    """Run the package manager's install command in project_dir.

    Output goes straight to the user's terminal. Blocks until the command exits.
    """
    cmd = list(command)
    try:
        result = subprocess.run(cmd, cwd=project_dir)
    except OSError as e:
        logger.warning("Could not run %s: %s", " ".join(cmd), e)
        return CommandResult(ok=False, message=f"Could not run '{' '.join(cmd)}': {e}")

    if result.returncode != 0:
        logger.warning("%s exited with %d", " ".join(cmd), result.returncode)
        return CommandResult(
            ok=False,
            message=f"'{' '.join(cmd)}' exited with code {result.returncode}",
            returncode=result.returncode,
        )

    logger.info("Installed dependencies in %s", project_dir)
    return CommandResult(ok=True, message="Dependencies installed", returncode=0)


def init_git(
    project_dir: Path,
    commit_message: str = "Initial commit",
    timeout: float | None = 60.0,
) -> CommandResult:
    """Initialize a git repository in project_dir and commit every file.

    Runs ``git init``, ``git add -A`` and ``git commit -m <message>`` in order.
    The first failing step stops the sequence.
    """
    steps = [
        ["git", "init"],
        ["git", "add", "-A"],
        ["git", "commit", "-m", commit_message],
    ]

    for cmd in steps:
        step = " ".join(cmd[:2])
        try:
            result = subprocess.run(
                cmd,
                cwd=project_dir,
                capture_output=True,
                text=True,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired:
            logger.warning("%s timed out in %s", step, project_dir)
            return CommandResult(ok=False, message=f"'{step}' timed out")
        except OSError as e:
            logger.warning("Could not run %s: %s", step, e)
            return CommandResult(ok=False, message=f"Could not run '{step}': {e}")

        if result.returncode != 0:
            detail = (result.stderr or result.stdout or "").strip()[-_STDERR_TAIL:]
            logger.warning("%s failed (%d): %s", step, result.returncode, detail)
            message = f"'{step}' exited with code {result.returncode}"
            if detail:
                message = f"{message}: {detail}"
            return CommandResult(ok=False, message=message, returncode=result.returncode)

    logger.info("Initialized git repository in %s", project_dir)
    return CommandResult(ok=True, message="Git repository initialized", returncode=0)
