"""
Decomposer Console Output
==========================

Rich-based console output for decomposition reports. Digest aliases
added by the hyphenation rule are highlighted so they can be told apart
from tokens that appeared in the name itself.
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.text import Text

from shared.console import LexConsole
from decomposer.core.models import Decomposition, DecompositionReport


_TOKEN_STYLE = "bright_cyan"
_ALIAS_STYLE = "bright_magenta"


class DecomposerConsoleOutput:
    """Console output formatter for decomposition reports.

    Usage::

        output = DecomposerConsoleOutput(LexConsole())
        output.display_report(report)
    """

    def __init__(self, console: Optional[LexConsole] = None) -> None:
        self.console = console or LexConsole()
        self._rich = self.console.rich

    def display_report(self, report: DecompositionReport) -> None:
        """Render every decomposition followed by a summary panel."""
        self.console.section("Algorithm Decomposition")

        self.console.table(
            "Decomposed Names",
            ["Algorithm", "Segments", "Tokens", "Digest aliases"],
            [
                (
                    result.algorithm or "(empty)",
                    " / ".join(result.segments),
                    self._tokens_text(result),
                    Text(", ".join(result.digest_aliases), style=_ALIAS_STYLE),
                )
                for result in report.results
            ],
            styles=["bold"],
        )

        summary = Text()
        summary.append("Names: ", style="bold")
        summary.append(f"{report.total_names}\n")
        summary.append("Distinct tokens: ", style="bold")
        summary.append(f"{len(report.all_tokens)}\n")
        summary.append("Duration: ", style="bold")
        summary.append(f"{report.duration:.3f}s")
        self._rich.print(
            Panel(summary, title=Text(report.source), border_style="cyan")
        )

    @staticmethod
    def _tokens_text(result: Decomposition) -> Text:
        if result.is_empty:
            return Text("(none)", style="dim")

        aliases = set(result.digest_aliases)
        text = Text()
        for idx, token in enumerate(result.tokens):
            if idx:
                text.append(", ")
            text.append(token, style=_ALIAS_STYLE if token in aliases else _TOKEN_STYLE)
        return text
