"""Tests for tasks.py — dependency install and git initialization."""

import shutil
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from create_ts_router_vite.tasks import CommandResult, init_git, install_dependencies


def _completed(cmd, returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    d = tmp_path / "my-app"
    d.mkdir()
    (d / "index.ts").write_text("console.log('hi')\n")
    return d


@pytest.fixture
def git_env(monkeypatch) -> None:
    """Isolate git from the user's config and give it an identity."""
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", "/dev/null")
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")


class TestInstallDependencies:
    @patch("create_ts_router_vite.tasks.subprocess.run")
    def test_success(self, mock_run, project_dir: Path) -> None:
        mock_run.return_value = _completed(["bun", "install"])

        result = install_dependencies(project_dir)

        assert result == CommandResult(ok=True, message="Dependencies installed", returncode=0)
        mock_run.assert_called_once_with(["bun", "install"], cwd=project_dir)

    @patch("create_ts_router_vite.tasks.subprocess.run")
    def test_custom_command(self, mock_run, project_dir: Path) -> None:
        mock_run.return_value = _completed(["npm", "install"])

        install_dependencies(project_dir, ("npm", "install"))
        mock_run.assert_called_once_with(["npm", "install"], cwd=project_dir)

    @patch("create_ts_router_vite.tasks.subprocess.run")
    def test_nonzero_exit(self, mock_run, project_dir: Path) -> None:
        mock_run.return_value = _completed(["bun", "install"], returncode=1)

        result = install_dependencies(project_dir)
        assert result.ok is False
        assert result.returncode == 1
        assert "exited with code 1" in result.message

    @patch("create_ts_router_vite.tasks.subprocess.run", side_effect=FileNotFoundError)
    def test_not_installed(self, mock_run, project_dir: Path) -> None:
        result = install_dependencies(project_dir)
        assert result.ok is False
        assert result.returncode is None
        assert "Could not run 'bun install'" in result.message


class TestInitGitMocked:
    @patch("create_ts_router_vite.tasks.subprocess.run")
    def test_runs_three_steps_in_order(self, mock_run, project_dir: Path) -> None:
        mock_run.side_effect = lambda cmd, **kw: _completed(cmd)

        result = init_git(project_dir, "Initial commit")

        assert result.ok is True
        commands = [c.args[0] for c in mock_run.call_args_list]
        assert commands == [
            ["git", "init"],
            ["git", "add", "-A"],
            ["git", "commit", "-m", "Initial commit"],
        ]
        for c in mock_run.call_args_list:
            assert c.kwargs["cwd"] == project_dir
            assert c.kwargs["capture_output"] is True

    @patch("create_ts_router_vite.tasks.subprocess.run")
    def test_stops_at_first_failure(self, mock_run, project_dir: Path) -> None:
        mock_run.side_effect = [
            _completed(["git", "init"]),
            _completed(["git", "add", "-A"], returncode=128, stderr="fatal: boom\n"),
        ]

        result = init_git(project_dir)

        assert result.ok is False
        assert result.returncode == 128
        assert "'git add'" in result.message
        assert "fatal: boom" in result.message
        assert mock_run.call_count == 2

    @patch(
        "create_ts_router_vite.tasks.subprocess.run",
        side_effect=subprocess.TimeoutExpired(["git", "init"], 1),
    )
    def test_timeout(self, mock_run, project_dir: Path) -> None:
        result = init_git(project_dir, timeout=1)
        assert result.ok is False
        assert "timed out" in result.message
        assert mock_run.call_count == 1

    @patch("create_ts_router_vite.tasks.subprocess.run", side_effect=FileNotFoundError)
    def test_git_not_installed(self, mock_run, project_dir: Path) -> None:
        result = init_git(project_dir)
        assert result.ok is False
        assert "Could not run 'git init'" in result.message


@pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
class TestInitGitReal:
    def test_creates_initial_commit(self, project_dir: Path, git_env) -> None:
        result = init_git(project_dir, "Initial commit")

        assert result.ok is True
        log = subprocess.run(
            ["git", "log", "--oneline"],
            cwd=project_dir,
            capture_output=True,
            text=True,
        )
        assert "Initial commit" in log.stdout
        tracked = subprocess.run(
            ["git", "ls-files"],
            cwd=project_dir,
            capture_output=True,
            text=True,
        )
        assert "index.ts" in tracked.stdout

    def test_empty_directory_fails_at_commit(self, tmp_path: Path, git_env) -> None:
        result = init_git(tmp_path)

        assert result.ok is False
        assert "'git commit'" in result.message
        assert (tmp_path / ".git").is_dir()
