"""Console output and formatting helpers for the DevMind CLI."""

from datetime import datetime
from typing import Sequence

from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from domain.entities import AnalysisResult, HistoryItem, SessionState, ViewState

TIP = (
    'Tip: you can ask for changes by refining the context, for example by '
    'adding "Intended for a non-technical client".'
)


def format_timestamp(timestamp: datetime) -> str:
    """Render a history timestamp as ``HH:MM``."""
    return timestamp.strftime("%H:%M")


def truncate(text: str, width: int = 60) -> str:
    """Collapse whitespace and shorten ``text`` to ``width`` characters."""
    flat = " ".join(text.split())
    return flat if len(flat) <= width else flat[: width - 3] + "..."


def show_welcome(console) -> None:
    console.print("🧠 DevMind - AI Software Engineering Agent")
    console.print(
        "Describe a technical, product or organisational situation and I will "
        "pick and write the most useful deliverable."
    )
    console.print()


def show_help(console) -> None:
    """Show help information."""
    console.print()
    console.print("🚀 Getting Started")
    console.print("Type a context in plain language and press Enter.")
    console.print()

    console.print("📝 For example:")
    console.print("• Fixed a null pointer bug in login flow")
    console.print("• The payment API was down for 20 minutes after the last deploy")
    console.print("• We need to explain the new caching layer to the support team")
    console.print()

    console.print("💡 Commands you can use:")
    console.print("• help - Show this message")
    console.print("• history - List the latest analyses")
    console.print("• load <n|id> - Show an analysis from the history")
    console.print("• show - Show the current result again")
    console.print("• copy - Copy the generated deliverable to the clipboard")
    console.print("• clear-history - Forget all analyses")
    console.print("• clear - Clear the screen")
    console.print("• exit or quit - Leave")
    console.print()


def show_idle(console) -> None:
    console.print("📄 Ready to analyse")
    console.print(
        "Enter a technical or organisational context so the agent can "
        "generate the best deliverable."
    )


def show_error(console, message: str) -> None:
    console.print(f"[red]ⓘ {escape(message)}[/red]")
    console.print("Your text is kept in the prompt, press Enter to try again.")


def show_result(console, result: AnalysisResult) -> None:
    """Display the deliverable, the reasoning steps and the justification."""
    console.print()
    console.print(
        Panel(
            Markdown(result.generated_content),
            title=f"✅ Generated deliverable: [bold]{escape(result.deliverable_type)}[/bold]",
            title_align="left",
        )
    )

    console.print("[bold]Reasoning[/bold]")
    if not result.reasoning:
        console.print("  (no reasoning steps)")
    for idx, step in enumerate(result.reasoning, start=1):
        console.print(f"  [cyan]{idx}.[/cyan] {escape(step)}")
    console.print()

    console.print("[bold]Justification[/bold]")
    console.print(f"  [italic]{escape(result.justification)}[/italic]")
    console.print()
    console.print(f"[dim]{TIP}[/dim]")
    console.print()


def render_state(console, state: SessionState) -> None:
    """Render whichever of the four view states the session is in."""
    view = state.view_state
    if view is ViewState.LOADING:
        console.print("⏳ Analysis in progress...")
    elif view is ViewState.ERROR:
        show_error(console, state.current_error or "")
    elif view is ViewState.RESULT:
        show_result(console, state.current_result)
    else:
        show_idle(console)


def show_history(console, history: Sequence[HistoryItem]) -> None:
    """Display the latest analyses, most recent first."""
    if not history:
        console.print("No history yet. Submit a context to get started.")
        return

    table = Table(title="Latest analyses", show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=3)
    table.add_column("Id", style="dim", width=10)
    table.add_column("Type", width=24)
    table.add_column("Time", width=6)
    table.add_column("Context", width=60)

    for position, item in enumerate(history, start=1):
        table.add_row(
            str(position),
            item.id,
            escape(item.deliverable_type),
            format_timestamp(item.timestamp),
            escape(f'"{truncate(item.context, 58)}"'),
        )

    console.print(table)
