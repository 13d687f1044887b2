"""Terminal confirmation prompts.

Provides the Question implementation used by the command line: each
prompt is written to stderr and defaults to "no".
"""

import typer

from rmtrash.core.confirmation import Question
from rmtrash.utils.formatting import PROG_NAME


class ConsoleQuestion(Question):
    """Asks the user on the terminal.

    End of input (Ctrl-D) or an interrupted prompt counts as "no".
    """

    def ask(self, message: str) -> bool:
        try:
            return typer.confirm(f"{PROG_NAME}: {message}", default=False, err=True)
        except typer.Abort:
            return False
