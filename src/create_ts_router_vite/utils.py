"""Path helpers shared by settings and the session.

Resolves the per-user config directory and the template bundled with the
package.
"""

import os
from pathlib import Path

APP_DIR_ENV = "CREATE_TS_ROUTER_VITE_DIR"

# Template tree bundled with the package
TEMPLATE_DIR = Path(__file__).parent / "template"


def app_dir() -> Path:
    """Return the config directory ($CREATE_TS_ROUTER_VITE_DIR or ~/.create-ts-router-vite)."""
    raw = os.environ.get(APP_DIR_ENV, "").strip()
    if raw:
        return Path(os.path.expanduser(raw))
    return Path.home() / ".create-ts-router-vite"
