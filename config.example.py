# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKDECK_APP_NAME": "App display name (default: taskdeck).",
    "TASKDECK_LOG_LEVEL": "Console logging level; never lower than WARNING in the REPL (default: INFO).",
    # Storage (gitignored)
    "TASKDECK_DATA_DIR": "Local data directory for the database and logs (default: .local/taskdeck).",
    "TASKDECK_STORAGE_BACKEND": "sqlite (durable) or memory (lost on exit) (default: sqlite).",
    "TASKDECK_STORAGE_PATH": "SQLite key-value store path (default: <data_dir>/tasks.sqlite3).",
    "TASKDECK_STORAGE_KEY": "Key the task list blob is stored under (default: dynamicTaskManagerTasks).",
    # Console defaults
    "TASKDECK_DEFAULT_PRIORITY": "Priority for plain-text adds: High, Medium or Low (default: Medium).",
    "TASKDECK_DEFAULT_FILTER": "Initial filter: all, High, Medium or Low (default: all).",
    "TASKDECK_DEFAULT_SORT": "Initial sort: latest, priority-desc or priority-asc (default: latest).",
    "TASKDECK_CONFIRM_DELETE": "Ask before /rm (true/false, default: true).",
}
