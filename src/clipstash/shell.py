"""
Terminal prompts for the interactive loop.

InteractionShell is the interface the application controller talks to.
RichShell implements it with rich prompts and a rich Console; tests use a
scripted implementation instead.
"""

from typing import Any, Protocol, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from clipstash.errors import InvalidInputError, UserCancelledError


class InteractionShell(Protocol):
    def prompt_text(self, label: str, allow_empty: bool = False) -> str: ...

    def prompt_choice(self, label: str, options: Sequence[str]) -> int: ...

    def show(self, renderable: Any) -> None: ...

    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class RichShell:
    """Prompts on a rich Console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False, color_system="auto")

    def prompt_text(self, label: str, allow_empty: bool = False) -> str:
        """
        Ask for a line of text.

        Raises:
            UserCancelledError: On Ctrl-C or end of input.
            InvalidInputError: If the answer is empty and allow_empty is False.
        """
        try:
            answer = Prompt.ask(f"[bold]{label}[/bold]", console=self.console)
        except (KeyboardInterrupt, EOFError):
            raise UserCancelledError("Cancelled.") from None
        if not answer and not allow_empty:
            raise InvalidInputError(f"{label.rstrip(':')} cannot be empty.")
        return answer

    def prompt_choice(self, label: str, options: Sequence[str]) -> int:
        """
        Show a numbered menu and return the zero-based index of the choice.

        Raises:
            UserCancelledError: On Ctrl-C or end of input.
            InvalidInputError: If there is nothing to choose from.
        """
        if not options:
            raise InvalidInputError(f"Nothing to choose from for: {label}")
        self.console.print(f"[bold]{label}[/bold]")
        for number, option in enumerate(options, start=1):
            self.console.print(f"  [cyan]{number}[/cyan]) {escape(option)}")
        numbers = [str(n) for n in range(1, len(options) + 1)]
        try:
            answer = Prompt.ask(
                "Choice",
                console=self.console,
                choices=numbers,
                show_choices=False,
            )
        except (KeyboardInterrupt, EOFError):
            raise UserCancelledError("Cancelled.") from None
        return int(answer) - 1

    def show(self, renderable: Any) -> None:
        self.console.print(renderable)

    def info(self, message: str) -> None:
        self.console.print(message, markup=False)

    def error(self, message: str) -> None:
        self.console.print(
            f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True
        )


__all__ = ["InteractionShell", "RichShell"]
