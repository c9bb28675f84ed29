"""
Output module for canonical_data_syncer argument handling

Writes help, version and error text for a finished parse. Everything goes to
standard output, errors included.
"""

from typing import Optional

from rich.console import Console


class Reporter:
    """Writes the text of a finished ParseOutcome"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def emit(self, outcome):
        if outcome.error is not None:
            self.console.out("Error: ", style="red", end="")
            self.console.out(outcome.error, end="\n\n")
        self.console.out(outcome.text, end="")
        self.console.file.flush()
