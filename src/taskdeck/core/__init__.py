"""
Core wiring shared by every connector.

- ports.py: protocols the core depends on (KeyValueStore, ConfirmFn, Clock)
- state.py: AppState (settings, task store, current view)
"""
