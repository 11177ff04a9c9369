"""
Key-value blob stores.

- kv_store.py: SQLite-backed durable store and an in-memory store (optional quota)
"""
