"""Root conftest — pins the config dir BEFORE any create_ts_router_vite module is imported.

utils.app_dir() reads CREATE_TS_ROUTER_VITE_DIR, so a developer's real
~/.create-ts-router-vite (settings.toml, .env) must never leak into tests.
"""

import os
import tempfile

import pytest

# Drop real overrides so every test starts from the built-in defaults
for _key in [k for k in os.environ if k.startswith("CREATE_TS_ROUTER_VITE_")]:
    del os.environ[_key]
os.environ["CREATE_TS_ROUTER_VITE_DIR"] = tempfile.mkdtemp(
    prefix="create-ts-router-vite-test-"
)


@pytest.fixture(autouse=True)
def _restore_environ():
    """load_dotenv() writes straight into os.environ; undo it after each test."""
    saved = dict(os.environ)
    yield
    os.environ.clear()
    os.environ.update(saved)
