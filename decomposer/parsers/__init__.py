"""
Decomposer Parsers
===================

Extraction of algorithm names from algorithm lists and security
property files.
"""

from decomposer.parsers.name_parser import NameParser

__all__ = [
    "NameParser",
]
