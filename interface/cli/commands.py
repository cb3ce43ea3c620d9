"""Command handling for the DevMind CLI."""
from typing import List

from rich.prompt import Confirm

from infrastructure.logging import get_logger

from . import display, session

logger = get_logger(__name__)

COMMANDS: List[str] = [
    "help", "exit", "quit", "clear", "history", "load", "show", "copy",
    "clear-history",
]


def handle_command(cli, user_input: str) -> bool:
    """Handle a command or a context to analyse. Returns False to exit."""
    command, _, argument = user_input.strip().partition(" ")
    command = command.lower()
    controller = cli.controller

    if command in ("exit", "quit") and not argument:
        return False
    if command == "help" and not argument:
        display.show_help(cli.console)
        return True
    if command == "clear" and not argument:
        cli.console.clear()
        return True
    if command == "history" and not argument:
        display.show_history(cli.console, controller.state.history)
        return True
    if command == "show" and not argument:
        display.render_state(cli.console, controller.state)
        return True
    if command == "copy" and not argument:
        copy_result(cli)
        return True
    if command == "clear-history" and not argument:
        if Confirm.ask("Clear the analysis history?", console=cli.console):
            controller.clear_history()
            cli.console.print("🗑  History cleared.")
        return True
    if command == "load":
        if argument.strip():
            load_result(cli, argument)
        else:
            cli.console.print("Usage: load <n|id>. Type 'history' to list the analyses.")
        return True

    process_context(cli, user_input)
    return True


def load_result(cli, ref: str) -> None:
    """Show a stored analysis and put its context back in the prompt."""
    item = cli.controller.find_history_item(ref)
    if item is None:
        cli.console.print(f"No analysis matches '{ref.strip()}'. Type 'history' to list them.")
        return
    cli.controller.load_from_history(item)
    display.render_state(cli.console, cli.controller.state)


def copy_result(cli) -> None:
    if cli.controller.state.current_result is None:
        cli.console.print("Nothing to copy yet.")
        return
    if cli.controller.copy_result_content():
        cli.console.print("📋 Copied!")
    else:
        cli.console.print("I couldn't reach the clipboard on this system.")


def process_context(cli, context: str) -> None:
    """Analyse a free-text context and show the outcome."""
    if not session.submit_with_progress(cli.console, cli.controller, context):
        logger.debug("Submission ignored (busy or blank input)")
        return
    display.render_state(cli.console, cli.controller.state)
