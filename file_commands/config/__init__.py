"""Configuration module for Smart File Commands."""

from .settings import (
    Config,
    InterpreterConfig,
    ScannerConfig,
)
from .categories import TypeExpansionTable, TYPE_TABLE

__all__ = [
    "Config",
    "InterpreterConfig",
    "ScannerConfig",
    "TypeExpansionTable",
    "TYPE_TABLE",
]
