"""
Language-specific code generators.

This module contains generators for different target languages.
"""

from .dart import DartFreezedGenerator, create_dart_generator

__all__ = [
    "DartFreezedGenerator",
    "create_dart_generator",
]
