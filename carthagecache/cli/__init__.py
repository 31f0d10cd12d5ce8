"""
carthage-cache CLI module.

This module provides the command-line interface for carthage-cache.
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
