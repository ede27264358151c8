"""create-ts-router-vite - scaffold a TanStack Router + Vite app from a bundled template.

Copies the template shipped inside this package into a new project directory,
patches package.json and .gitignore, then optionally installs dependencies and
creates an initial git commit.

Package entry point. Exports the version string only; all functional
modules are imported lazily by main.py to keep startup fast.
"""

__version__ = "0.1.0"
