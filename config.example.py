# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO).",
    "TODO_DATA_DIR": "Local data directory for todo.log (default: .local/todo).",
    # Remote listing
    "TODO_API_BASE_URL": "Remote listing base URL; GET <base>/todos (default: https://jsonplaceholder.typicode.com).",
    "TODO_API_TIMEOUT_SECONDS": "HTTP timeout for the listing request (default: 12).",
    "TODO_FETCH_ON_START": "Seed the store from the remote listing at startup (true/false, default: true).",
    # Initial view
    "TODO_DEFAULT_FILTER": "all | active | done (default: all).",
    "TODO_DEFAULT_SORT": "most_recent | id (default: most_recent).",
}
