"""
Console-facing layer.

- bootstrap.py: composition root (settings -> stores -> AppState)
- commands.py: slash-command registry and task list rendering
- main.py: `taskdeck` entrypoint
"""
