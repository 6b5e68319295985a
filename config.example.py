# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "CREW_APP_NAME": "App display name (default: crew-schedule).",
    "CREW_LOG_LEVEL": "Console logging level (default: INFO).",
    "CREW_LOG_DIR": "Directory for crew.log (default: .local/crew).",
    "CREW_LOG_TO_FILE": "Also write full DEBUG logs to CREW_LOG_DIR (true/false, default: false).",
    # Notifications
    "CREW_NOTIFY_PREFIX": "Label printed before every notification (default: 'Notification: ').",
    "CREW_LOG_NOTIFICATIONS": "Also write every notification to the log (true/false, default: false).",
    # Entry point
    "CREW_DEMO_ENABLED": "Run the scripted daily plan on startup (true/false, default: true).",
    "CREW_CONSOLE_ENABLED": "Start the interactive /command console (true/false, default: false).",
}
