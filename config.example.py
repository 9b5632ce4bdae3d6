# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TICKLIST_APP_NAME": "App display name (default: ticklist).",
    "TICKLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    "TICKLIST_DATA_DIR": "Directory for ticklist.log (default: .local/ticklist).",
    "TICKLIST_FILE_LOGGING": "Write the DEBUG log file (true/false, default: true).",
    # Engine
    "TICKLIST_DELETE_DELAY_MS": "Delay between a delete request and the removal (default: 200).",
    # Console
    "TICKLIST_BAR_WIDTH": "Progress bar width in characters (default: 30, min 5).",
}
