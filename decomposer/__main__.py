"""
Decomposer Module Entry Point
==============================

Allows running the AlgoLex CLI via: python -m decomposer
"""

from decomposer.cli import main

if __name__ == "__main__":
    main()
