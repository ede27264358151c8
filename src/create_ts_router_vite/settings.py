"""User settings — reads .env + settings.toml + environment into a Settings object.

Every key has a built-in default, so neither file is required. Precedence
(highest first): CREATE_TS_ROUTER_VITE_<KEY> environment variables
(including values loaded from .env), settings.toml, defaults.

Key entities:
  - Settings: frozen dataclass with all resolved config for one run.
  - load_settings(): parse .env + settings.toml → Settings.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .utils import TEMPLATE_DIR, app_dir

logger = logging.getLogger(__name__)

ENV_PREFIX = "CREATE_TS_ROUTER_VITE_"

GIT_INIT_POLICIES = ("prompt", "always", "never")


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one scaffolding run."""

    # External tools
    package_manager: str = "bun"
    dev_script: str = "dev"

    # Prompts
    default_project_name: str = "my-super-app"
    git_init: str = "prompt"  # "prompt" | "always" | "never"

    # Git
    commit_message: str = "Initial commit"
    git_timeout: float = 60.0

    # Paths
    template_dir: Path = field(default_factory=lambda: TEMPLATE_DIR)
    config_dir: Path = field(default_factory=lambda: app_dir())

    @property
    def install_command(self) -> tuple[str, ...]:
        return (self.package_manager, "install")

    @property
    def dev_command(self) -> str:
        return f"{self.package_manager} run {self.dev_script}"


# ---------------------------------------------------------------------------
# load_settings
# ---------------------------------------------------------------------------

_STRING_KEYS = (
    "package_manager",
    "dev_script",
    "default_project_name",
    "git_init",
    "commit_message",
)


def load_settings(config_dir: Path | None = None) -> Settings:
    """Read .env + settings.toml and return the merged Settings.

    Args:
        config_dir: Override for the config directory.
                    Defaults to ``app_dir()``.

    Raises:
        ValueError: If a value is out of range or settings.toml is malformed.
    """
    if config_dir is None:
        config_dir = app_dir()

    # Load .env files (local cwd first, then config_dir)
    local_env = Path(".env")
    global_env = config_dir / ".env"
    if local_env.is_file():
        load_dotenv(local_env)
    if global_env.is_file():
        load_dotenv(global_env)

    raw: dict = {}
    toml_path = config_dir / "settings.toml"
    if toml_path.is_file():
        try:
            with open(toml_path, "rb") as f:
                raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid {toml_path}: {e}") from e
        logger.debug("Loaded settings from %s", toml_path)

    def _get(key: str, default):
        """Environment > settings.toml > default."""
        env_value = os.getenv(ENV_PREFIX + key.upper())
        if env_value:
            return env_value
        return raw.get(key, default)

    defaults = Settings(config_dir=config_dir)
    values = {key: str(_get(key, getattr(defaults, key))).strip() for key in _STRING_KEYS}

    git_init = values["git_init"].lower()
    if git_init not in GIT_INIT_POLICIES:
        raise ValueError(
            f"git_init must be one of {', '.join(GIT_INIT_POLICIES)} (got '{git_init}')."
        )
    values["git_init"] = git_init

    if not values["package_manager"]:
        raise ValueError("package_manager must not be empty.")

    raw_timeout = _get("git_timeout", defaults.git_timeout)
    try:
        git_timeout = float(raw_timeout)
    except (TypeError, ValueError) as e:
        raise ValueError(f"git_timeout must be a number (got '{raw_timeout}').") from e

    template_dir = Path(
        os.path.expanduser(str(_get("template_dir", defaults.template_dir)))
    )

    return Settings(
        git_timeout=git_timeout,
        template_dir=template_dir,
        config_dir=config_dir,
        **values,
    )
