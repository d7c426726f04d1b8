# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    # Front-ends
    "TASKLIST_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    "TASKLIST_HTTP_ENABLED": "Run the page server in the background (true/false, default: false).",
    # HTTP
    "TASKLIST_HTTP_MODE": "'hello' (fixed greeting) or 'file' (serve the asset), default: file.",
    "TASKLIST_HTTP_HOST": "Bind address (default: 127.0.0.1).",
    "TASKLIST_HTTP_PORT": "Port (default: 8080).",
    "TASKLIST_ASSET_PATH": "HTML file served in 'file' mode (default: index.html).",
    # Paths (gitignored)
    "TASKLIST_DATA_DIR": "Local data directory; also holds tasklist.log (default: .local/tasklist).",
    # Persistence
    "TASKLIST_STORAGE_BACKEND": "json | sqlite | memory (default: json).",
    "TASKLIST_STORE_PATH": "Backend file (default: <data_dir>/todos.json or todos.sqlite3).",
    "TASKLIST_STORAGE_KEY": "Key the task list is stored under (default: todos.v1).",
}
