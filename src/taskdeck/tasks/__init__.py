"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, PriorityFilter, SortMode)
- task_storage.py: persistence adapter (JSON blob under one key of a KeyValueStore)
- task_store.py: authoritative in-memory collection + mutations
- task_view.py: pure filter/sort processing used for rendering
"""
