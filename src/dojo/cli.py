"""
Dojo: Main CLI.

Commands:
- dojo init            - Set up the dojo in the current directory
- dojo start           - Begin a training session
- dojo learn <topic>   - Begin a lesson on an unlocked topic
"""
from __future__ import annotations

import sys
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from config import get_settings

from . import __version__
from .errors import StoreWriteError
from .layout import DojoLayout
from .service import DojoService, InitStatus, LessonStatus, StartStatus

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="dojo",
    help="""🥷 Dirt Claude Dojo - From dirt claude poor to 10x developer

Master CLI fundamentals through deliberate practice with LLM partnership.
Learn to think with Claude, not copy from Claude.

Core principles:

- NO_COPY_PASTE: Build muscle memory through typing

- LEARNING_BY_BUILDING: Curriculum evolves as you progress

- SOCRATIC_METHOD: Claude guides, never provides direct answers

- PROGRESSIVE_DISCLOSURE: Earn your way to advanced features""",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()

NOT_INITIALIZED = "❌ Dojo not initialized. Run 'dojo init' first."


def _service() -> DojoService:
    """Create the service for the configured dojo root."""
    return DojoService.from_layout(DojoLayout.from_settings(get_settings()))


def _write_failed(error: Exception) -> typer.Exit:
    logger.error(str(error))
    console.print(f"[red]❌ Could not save dojo state: {error}[/red]")
    return typer.Exit(1)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"dojo {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
) -> None:
    pass


# =============================================================================
# Commands
# =============================================================================


@app.command()
def init() -> None:
    """
    Initialize your dojo training environment.

    Sets up your personal development dojo with progress tracking,
    Claude Code integration, the learning environment structure and
    your first foundational lesson.
    """
    console.print("🥷 Initializing Dirt Claude Dojo...")
    service = _service()

    if service.is_initialized():
        console.print("🎯 Dojo already initialized! Use 'dojo start' to begin training.")
        return

    try:
        name = Prompt.ask("Enter your name (or nickname)", default="", show_default=False, console=console).strip()
    except EOFError:
        name = ""

    try:
        result = service.initialize(name)
    except StoreWriteError as e:
        raise _write_failed(e)
    except OSError as e:
        logger.error(f"Failed to create dojo directories: {e}")
        console.print(f"[red]❌ Failed to create dojo directories: {e}[/red]")
        raise typer.Exit(1)

    if result.status == InitStatus.ALREADY_INITIALIZED:
        console.print("🎯 Dojo already initialized! Use 'dojo start' to begin training.")
        return

    console.print(f"🎉 Welcome to the dojo, {escape(name)}!")
    console.print("📚 Your CLI mastery journey begins now.")
    console.print("💪 Remember: No copy-paste, only deliberate practice.")
    console.print("\n🚀 Ready to start? Run: [bold cyan]dojo learn cli-basics[/bold cyan]")


@app.command()
def start() -> None:
    """
    Begin daily training session with Claude monitoring.

    Starts a monitored learning session where Claude Code will track your
    progress and struggles, provide socratic guidance when you're stuck,
    prevent destructive commands in learning mode, and celebrate your wins.
    """
    result = _service().start_session()

    if result.status == StartStatus.NOT_INITIALIZED:
        console.print(NOT_INITIALIZED)
        return

    user = result.progress.user
    console.print(f"🥷 Training session started for {escape(user.name)}")
    console.print(f"📊 Current level: {user.current_level}")
    console.print(f"🔄 Session #{user.total_sessions}")
    console.print("👁️  Claude Code monitoring enabled")
    console.print("\n💡 Claude will provide guidance when you struggle, but won't give direct answers.")
    console.print("🎯 Use 'dojo learn <topic>' to begin a lesson.")


@app.command()
def learn(
    topic: Annotated[str, typer.Argument(help="Topic to study (e.g., cli-basics)")],
) -> None:
    """
    Start learning a specific topic with context.

    Begin a structured lesson on a CLI topic.
    Claude will monitor your progress and provide guidance.

    Available topics will unlock as you progress:

    - cli-basics: Terminal navigation and file operations

    - version-control: Git fundamentals and workflows

    - scripting: Bash automation and best practices
    """
    result = _service().start_lesson(topic)

    if result.status == LessonStatus.NOT_INITIALIZED:
        console.print(NOT_INITIALIZED)
        return

    if result.status == LessonStatus.UNKNOWN_TOPIC:
        console.print(f"❌ Topic '{escape(result.topic)}' not found.")
        console.print(f"Available topics: {escape(', '.join(result.known_topics))}")
        return

    if result.status == LessonStatus.LOCKED:
        console.print(f"🔒 Topic '{escape(result.topic)}' is locked. Complete prerequisites first.")
        return

    objective = result.integration.lesson_context.objective or "No objective defined for this topic yet"
    foundation = result.foundation
    console.print(f"📚 Starting lesson: {escape(result.topic)}")
    console.print(f"🎯 Objective: {objective}")
    console.print(f"📊 Progress: {foundation.lessons_completed}/{foundation.total_lessons} lessons completed")
    console.print("\n🥷 Begin your practice. Claude is watching and ready to guide you.")
    console.print("💡 Remember: Type everything manually. No copy-paste!")


# =============================================================================
# Entry Point
# =============================================================================


def run() -> None:
    """CLI entry point."""
    # Configure logging
    logger.remove()
    logger.add(
        sys.stderr,
        level=get_settings().log_level.upper(),
        format="<level>{message}</level>",
    )

    app()


if __name__ == "__main__":
    run()
