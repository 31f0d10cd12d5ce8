"""
Mock implementations for testing carthage-cache components.

This package provides stand-ins for external commands so tests never
invoke carthage or Xcode tools.
"""

from .process import FakeProcessRunner

__all__ = [
    "FakeProcessRunner",
]
