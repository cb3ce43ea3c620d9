"""Interactive terminal front end for DevMind.

The CLI reads contexts and commands from the prompt and renders the state of
a :class:`~application.controllers.SessionController`: idle, loading, result
or error. All state changes go through the controller.

Example
-------
>>> from interface.cli import DevMindCLI
>>> from app_factory import create_session_controller
>>> DevMindCLI(create_session_controller()).start_interactive_session()  # doctest: +SKIP
"""

from .interface import DevMindCLI

__all__ = ["DevMindCLI"]
