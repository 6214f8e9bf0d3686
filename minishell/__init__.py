"""Command-line tokenizing, syntax trees and builtin commands of a small shell."""

__version__ = "0.1.0"

__all__ = ["__version__"]