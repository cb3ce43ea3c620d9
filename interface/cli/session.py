"""Session helpers for the DevMind CLI."""

from rich.progress import Progress, SpinnerColumn, TextColumn

from application.controllers import SessionController


def submit_with_progress(console, controller: SessionController, text: str) -> bool:
    """Submit ``text`` while showing a spinner. Returns whether a request ran."""
    controller.set_input(text)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(
            "🧠 Evaluating intent and choosing the best format...", total=None
        )
        return controller.submit()
