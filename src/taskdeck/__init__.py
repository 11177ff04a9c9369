"""
taskdeck: a small personal task list.

Subpackages:
- tasks: data structures, persistence adapter, store and view processing
- storage: key-value blob stores the persistence adapter writes into
- core: ports (protocols) and application state
- cli / connectors: composition root, slash commands and the console REPL
"""

__version__ = "0.1.0"
