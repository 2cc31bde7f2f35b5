"""Command-line interface modules for the comparison runner.

This package contains core execution logic, making scripts/ optional and deletable.
"""

from fallible.cli.run_comparison import compare_error_handling, main

__all__ = ['compare_error_handling', 'main']
