# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKMATE_APP_NAME": "Name used in the greeting (default: taskmate).",
    "TASKMATE_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKMATE_LOG_TO_FILE": "Write full debug logs to <data_dir>/taskmate.log (true/false, default: true).",
    # Behaviour
    "TASKMATE_AUTOSAVE": "Save the task list after every change (true/false, default: true).",
    # Paths (gitignored)
    "TASKMATE_DATA_DIR": "Local data directory (default: .local/taskmate).",
    "TASKMATE_TASKS_PATH": "Task list JSON path (default: <data_dir>/tasks.json).",
}
