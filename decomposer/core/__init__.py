"""
Decomposer Core Module
=======================

Contains the decomposition rules, the batch engine, and the data models.
"""

from decomposer.core.decomposer import (
    DIGEST_VARIANTS,
    AlgorithmDecomposer,
    decompose,
)
from decomposer.core.engine import DecomposerEngine
from decomposer.core.models import Decomposition, DecompositionReport

__all__ = [
    "DIGEST_VARIANTS",
    "AlgorithmDecomposer",
    "DecomposerEngine",
    "Decomposition",
    "DecompositionReport",
    "decompose",
]
