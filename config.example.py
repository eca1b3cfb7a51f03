# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use .env (local, gitignored) for machine-specific values.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASK_TRACKER_APP_NAME": "App display name (default: task-tracker).",
    "TASK_TRACKER_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASK_TRACKER_LOG_TO_FILE": "Also write full DEBUG logs to <data_dir>/task_tracker.log (true/false).",
    # Storage
    "TASK_TRACKER_DATA_DIR": "Local data directory (default: .local/task_tracker).",
    "TASK_TRACKER_SINK": "Key-value sink: json | sqlite | memory (default: json).",
    "TASK_TRACKER_SINK_PATH": (
        "Sink file path (default: <data_dir>/tasks.json or <data_dir>/tasks.sqlite3)."
    ),
    "TASK_TRACKER_STORAGE_KEY": "Key the whole task list is stored under (default: tasks).",
}
