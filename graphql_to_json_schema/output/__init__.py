"""
Output module.

Writes generated files and delegates type-declaration compilation to an
external tool.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .typings import TypingsCompiler

__all__ = [
    "AtomicWriter",
    "TypingsCompiler",
]
