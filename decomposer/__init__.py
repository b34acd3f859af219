"""
AlgoLex Decomposer -- Cryptographic Algorithm Name Decomposition
=================================================================

Decomposes composite algorithm names ("SHA256withRSA",
"PBEWithSHA1AndDESede", "AES/CBC/PKCS5Padding") into the sub-algorithm
names a security policy checks independently.

Modules:
    - decomposer.core.decomposer: Name decomposition rules
    - decomposer.core.engine: Batch orchestration
    - decomposer.core.models: Pydantic data models
    - decomposer.parsers: Algorithm list parsing
    - decomposer.output: Console and report output
    - decomposer.cli: Click-based command-line interface
"""

__version__ = "1.0.0"
__tool_name__ = "decomposer"
