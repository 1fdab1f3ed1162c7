"""Command line interface."""

from .command import EXIT_FATAL, EXIT_SUCCESS, main

__all__ = ["EXIT_FATAL", "EXIT_SUCCESS", "main"]
