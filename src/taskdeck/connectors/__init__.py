"""
Connectors (presentation bindings).

- console_connector.py: interactive REPL over AppState
"""
