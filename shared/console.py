"""
AlgoLex Console Interface
==========================

Rich-powered console abstraction providing a unified presentation layer
for every AlgoLex module.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, tables and severity-coloured messages.
Message text is escaped before printing, so file paths and algorithm
names containing square brackets are shown verbatim.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all AlgoLex output
# ---------------------------------------------------------------------------
_LEX_THEME = Theme(
    {
        "lex.banner": "bold bright_cyan",
        "lex.section": "bold bright_magenta",
        "lex.success": "bold green",
        "lex.warning": "bold yellow",
        "lex.error": "bold red",
        "lex.info": "bold bright_blue",
        "lex.dim": "dim white",
    }
)

_BANNER_ART = r"""[bright_cyan]
    _    _             _
   / \  | | __ _  ___ | |    _____  __
  / _ \ | |/ _` |/ _ \| |   / _ \ \/ /
 / ___ \| | (_| | (_) | |__|  __/>  <
/_/   \_\_|\__, |\___/|_____\___/_/\_\
           |___/
[/bright_cyan]"""

_TAGLINE = "Cryptographic Algorithm Name Decomposer"


class LexConsole:
    """Unified console interface for AlgoLex modules.

    Usage::

        con = LexConsole()
        con.banner()
        con.section("Results")
        con.table("Tokens", ["Name", "Tokens"], [("SHA1withRSA", "RSA, SHA-1, SHA1")])
        con.success("Done")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for text export.
        """
        self._console = Console(
            theme=_LEX_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    def banner(self, version: str = "1.0.0") -> None:
        """Display the AlgoLex banner."""
        subtitle = (
            f"[lex.banner]{_TAGLINE}[/lex.banner]\n"
            f"[lex.dim]Version: {version}[/lex.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(f"  {escape(title)}  ", style="lex.section")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[lex.success][✔] SUCCESS:[/lex.success] {escape(message)}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[lex.warning][⚠] WARNING:[/lex.warning] {escape(message)}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[lex.error][✘] ERROR:[/lex.error] {escape(message)}"
        )

    def info(self, message: str) -> None:
        self._console.print(
            f"[lex.info][ℹ] INFO:[/lex.info] {escape(message)}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Row tuples. :class:`~rich.text.Text` cells keep their
                      styling, anything else is shown as plain text.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(
                *(cell if isinstance(cell, Text) else Text(str(cell)) for cell in row)
            )

        self._console.print(tbl)

    def export_text(self) -> str:
        """Export recorded output as plain text (requires ``record=True``)."""
        return self._console.export_text()
