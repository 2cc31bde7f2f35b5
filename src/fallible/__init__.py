"""`fallible` - two ways to report a failed search.

Subpackages:
- errors: Error kinds, message registry, raised error type
- handlers: Result, raising and logging error handlers
- schemas: Configuration models
- cli: Scenario runner and command-line entry point
"""

__version__ = "0.1.0"
