"""
Algorithm Name Parser
======================

Extracts algorithm names from text and files. Designed for the
comma-separated algorithm lists found in security property files, but
also accepts plain one-name-per-line lists.

Supported formats:
    - Plain list: ``SHA1withRSA`` (one per line)
    - Comma list: ``MD2, MD5, SHA1withDSA``
    - Property:   ``jdk.certpath.disabledAlgorithms=MD2, MD5, \\``
    - Constraint: ``RSA keySize < 1024`` (only ``RSA`` is kept)
    - Quoted:     ``"DES/CBC/NoPadding"``

Constraint expressions following an algorithm name are discarded, never
interpreted.
"""

from __future__ import annotations

import re
from pathlib import Path


# ===================================================================== #
#  Line Patterns
# ===================================================================== #

# Leading property key, e.g. "jdk.tls.disabledAlgorithms="
_PROPERTY_KEY_PATTERN = re.compile(r"^\s*[A-Za-z_][\w.\-]*\s*[=:]\s*")

# Entries that reference other property lists rather than algorithms
_INCLUDE_PATTERN = re.compile(r"^include\s+", re.IGNORECASE)


class NameParser:
    """Extracts algorithm names from text input and files.

    Usage::

        parser = NameParser()
        names = parser.parse_file(Path("java.security"))
        names = parser.parse_string("MD5withRSA, SHA1withDSA")
    """

    def __init__(self, comment_prefix: str = "#") -> None:
        """Initialise the name parser.

        Args:
            comment_prefix: Lines starting with this prefix are skipped.
        """
        self.comment_prefix = comment_prefix

    def parse_file(self, filepath: Path) -> list[str]:
        """Extract algorithm names from a file.

        Args:
            filepath: Path to the file to parse.

        Returns:
            List of algorithm names (deduplicated, order preserved).

        Raises:
            FileNotFoundError: If the file does not exist.
            PermissionError: If the file cannot be read.
        """
        with open(filepath, "r", encoding="utf-8", errors="replace") as f:
            return self.parse_string(f.read())

    def parse_string(self, text: str) -> list[str]:
        """Extract algorithm names from a text string.

        Args:
            text: Input text containing algorithm lists.

        Returns:
            List of algorithm names (deduplicated, order preserved).
        """
        names: list[str] = []
        seen: set[str] = set()

        for line in self._logical_lines(text):
            for name in self._parse_line(line):
                if name not in seen:
                    names.append(name)
                    seen.add(name)

        return names

    def _logical_lines(self, text: str) -> list[str]:
        """Join backslash-continued lines and drop blanks and comments."""
        lines: list[str] = []
        pending = ""

        for raw in text.splitlines():
            line = raw.strip()
            if not pending and (
                not line
                or (self.comment_prefix and line.startswith(self.comment_prefix))
            ):
                continue

            if line.endswith("\\"):
                pending += line[:-1] + " "
                continue

            lines.append(pending + line)
            pending = ""

        if pending.strip():
            lines.append(pending)

        return lines

    def _parse_line(self, line: str) -> list[str]:
        """Extract the algorithm names from a single logical line."""
        line = _PROPERTY_KEY_PATTERN.sub("", line, count=1)

        names: list[str] = []
        for entry in line.split(","):
            entry = entry.strip().strip('"').strip()
            if not entry or _INCLUDE_PATTERN.match(entry):
                continue
            # "RSA keySize < 1024" -> "RSA"
            names.append(entry.split()[0])

        return names
