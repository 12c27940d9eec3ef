"""File collection providers."""

from .scanner import DirectoryScanner, sample_files

__all__ = [
    "DirectoryScanner",
    "sample_files",
]
