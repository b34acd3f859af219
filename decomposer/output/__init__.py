"""
Decomposer Output
==================

Console and report output for decomposition results.
"""

from decomposer.output.console import DecomposerConsoleOutput
from decomposer.output.report import DecomposerReportGenerator

__all__ = [
    "DecomposerConsoleOutput",
    "DecomposerReportGenerator",
]
