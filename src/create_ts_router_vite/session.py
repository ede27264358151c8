"""Interactive session — ask for the project details, build it, report progress.

Flow (strictly linear):
  intro → ask name → ask install → ask git (if settings.git_init == "prompt")
  → materialize → install (optional) → git init (optional) → outro

Prompt helpers never exit the process. A cancelled prompt returns the
CANCELLED sentinel, which run_session() turns into exit code 0. A failed
materialization returns 1; failed install/git steps only print a warning.

Key entities:
  - ProjectRequest: the user's answers.
  - Prompter: rich-backed text/confirm prompts (swappable in tests).
  - run_session(): the whole flow, returns the process exit code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt

from .scaffold.materializer import materialize
from .settings import Settings
from .tasks import init_git, install_dependencies

logger = logging.getLogger(__name__)

TITLE = "create-ts-router-vite"
OVERVIEW = "A CLI for creating web applications with Tanstack Router and Vite"


class Cancelled:
    """Marker returned by a prompt the user aborted."""

    def __repr__(self) -> str:
        return "CANCELLED"


CANCELLED = Cancelled()


@dataclass(frozen=True)
class ProjectRequest:
    """Answers collected from the user for one run."""

    name: str
    install_dependencies: bool
    init_git: bool


class Prompter:
    """Text and yes/no prompts. Ctrl-C or EOF yields CANCELLED."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def text(self, message: str, default: str) -> str | Cancelled:
        try:
            answer = Prompt.ask(message, console=self.console, default=default)
        except (KeyboardInterrupt, EOFError):
            return CANCELLED
        return answer.strip() or default

    def confirm(self, message: str, default: bool = True) -> bool | Cancelled:
        try:
            return Confirm.ask(message, console=self.console, default=default)
        except (KeyboardInterrupt, EOFError):
            return CANCELLED


def collect_request(
    settings: Settings, prompter: Prompter
) -> ProjectRequest | Cancelled:
    """Ask every question up front. Stops at the first cancelled prompt."""
    name = prompter.text(
        "What is the name of your app?", default=settings.default_project_name
    )
    if isinstance(name, Cancelled):
        return CANCELLED

    install = prompter.confirm("Install dependencies?", default=True)
    if isinstance(install, Cancelled):
        return CANCELLED

    if settings.git_init == "prompt":
        git = prompter.confirm("Initialize a git repository?", default=True)
        if isinstance(git, Cancelled):
            return CANCELLED
    else:
        git = settings.git_init == "always"

    return ProjectRequest(name=name, install_dependencies=install, init_git=git)


def _install(console: Console, project_dir: Path, settings: Settings) -> None:
    command = " ".join(settings.install_command)
    console.print("Installing dependencies...")
    result = install_dependencies(project_dir, settings.install_command)
    if result.ok:
        console.print("[green]✔[/green] Dependencies installed!")
    else:
        console.print(
            f"[yellow]⚠ Failed to install dependencies. "
            f"You can run '{escape(command)}' manually.[/yellow]"
        )


def _init_git(console: Console, project_dir: Path, settings: Settings) -> None:
    with console.status("Initializing git repository..."):
        result = init_git(
            project_dir, settings.commit_message, timeout=settings.git_timeout
        )
    if result.ok:
        console.print("[green]✔[/green] Git repository initialized!")
    else:
        console.print(
            f"[yellow]⚠ Failed to initialize git repository: "
            f"{escape(result.message)}[/yellow]"
        )


def run_session(
    settings: Settings,
    prompter: Prompter | None = None,
    console: Console | None = None,
    cwd: Path | None = None,
) -> int:
    """Run the interactive flow and return the process exit code.

    Args:
        settings: Resolved settings (template, package manager, git policy).
        prompter: Prompt source. Defaults to a rich Prompter on console.
        console: Output console. Defaults to a new rich Console.
        cwd: Directory the project is created in. Defaults to the current
             working directory.
    """
    if console is None:
        console = Console()
    if prompter is None:
        prompter = Prompter(console)

    console.rule(f"[bold]{TITLE}[/bold]")
    console.print(Panel(OVERVIEW, title="Overview", expand=False))

    request = collect_request(settings, prompter)
    if isinstance(request, Cancelled):
        console.print("[red]Operation cancelled.[/red]")
        return 0

    name = escape(request.name)
    try:
        with console.status(f"Creating project {name}..."):
            project_dir = materialize(
                request.name, settings.template_dir, cwd or Path.cwd()
            )
    except (OSError, ValueError) as e:
        logger.debug("Materialization failed", exc_info=True)
        console.print(f"[red]Failed to create project: {escape(str(e))}[/red]")
        return 1
    console.print(f"[green]✔[/green] Project '{name}' created successfully!")

    if request.install_dependencies:
        _install(console, project_dir, settings)
    if request.init_git:
        _init_git(console, project_dir, settings)

    console.print(
        Panel(
            f"cd {name}\n{escape(settings.dev_command)}",
            title="Next steps",
            expand=False,
        )
    )
    console.print(f"🎉 You're all set! Navigate to '{name}' and start coding!")
    return 0
