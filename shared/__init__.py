"""
AlgoLex Shared Module
=====================

Configuration, logging, and console utilities shared across AlgoLex
modules.
"""

from shared.config import LexConfig, get_config

__all__ = ["LexConfig", "get_config"]
