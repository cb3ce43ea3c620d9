"""Interactive CLI interface for the DevMind agent."""

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console
from rich.prompt import Confirm

from application.controllers import SessionController
from infrastructure.logging import get_logger

from . import commands
from .display import show_help, show_welcome

logger = get_logger(__name__)


class DevMindCLI:
    """Interactive terminal front end for a :class:`SessionController`."""

    def __init__(self, controller: SessionController, console: Console | None = None) -> None:
        self.console = console or Console()
        self.history = InMemoryHistory()
        self.completer = WordCompleter(commands.COMMANDS)
        self.controller = controller

        show_welcome(self.console)

    def read_input(self) -> str:
        """Prompt for the next line, pre-filled with the pending input."""
        return prompt(
            "📝 Context: ",
            default=self.controller.state.input_text,
            history=self.history,
            completer=self.completer,
        ).strip()

    def start_interactive_session(self) -> None:
        """Run the read/analyse/render loop until the user leaves."""
        show_help(self.console)

        while True:
            try:
                user_input = self.read_input()
                if not user_input:
                    continue
                if not commands.handle_command(self, user_input):
                    break
            except KeyboardInterrupt:
                if Confirm.ask("\nDo you want to exit?", console=self.console):
                    break
            except EOFError:
                break
            except Exception as e:
                logger.error(f"CLI error: {e}", exc_info=True)
                self.console.print(f"I encountered an issue: {e}")
                self.console.print("Let's try that again, or type 'help' for assistance.")

        self.console.print("\n👋 Thanks for using DevMind!")
