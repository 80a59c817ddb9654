# src/parabehat/runtime/reporter.py

"""
Final console report printed once every worker has finished.
"""

from rich.console import Console
from rich.text import Text

from parabehat.state import RunState

EXTRAS_STYLE = "red"
ERROR_STYLE = "bold red"


def format_elapsed(seconds: float) -> str:
    if seconds >= 60:
        minutes, rest = divmod(seconds, 60)
        return f"{int(minutes)}m{rest:.3f}s"
    return f"{seconds:.3f}s"


class Reporter:
    """Prints extras, errors, the summary and the elapsed time, in that order."""

    def __init__(self, console: Console):
        self.console = console

    def report(self, state: RunState, elapsed: float) -> None:
        self.console.print()
        for block in state.extras:
            self.console.print(Text(block, style=EXTRAS_STYLE), soft_wrap=True)
        for error in state.errors:
            self.console.print(Text(error, style=ERROR_STYLE), soft_wrap=True)
        summary = state.summary.render_text()
        summary.rstrip()
        self.console.print(summary, soft_wrap=True)
        self.console.print()
        self.console.print(f"Tests ran in: {format_elapsed(elapsed)}", highlight=False)

# 🔼⚙️
