"""
Application Configuration

This file contains the configuration settings for the Hello Threads sample.
It follows a modular approach to keep settings organized and easy to manage.
Values that make sense to tweak per machine can be overridden through
environment variables or a local .env file.
"""

import os

from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

# --- Application Metadata ---
APP_NAME = "Hello Threads"
APP_VERSION = "0.1.0"

# --- Background Notification ---
# The delayed task started by a click waits `delay_ms` and then publishes
# `message` into the notification slot. Numbers read from the environment
# stay strings here and are validated where they are used.
NOTIFICATION = {
    "delay_ms": os.getenv("HELLO_THREADS_DELAY_MS", "5000"),
    "message": os.getenv("HELLO_THREADS_MESSAGE", "Hello, from threads!"),
    "failure_message": "Background task failed",
}

# --- Snackbar ---
# Transient notification shown at the bottom of the main window.
SNACKBAR = {
    "duration_ms": os.getenv("HELLO_THREADS_SNACKBAR_MS", "1500"),
    "fade_ms": 200,
    "margin": 16,
    "min_height": 48,
    "colors": {
        "background": "#323232",
        "text": "#FFFFFF",
    },
    "font_size": 14,
}

# --- Main Window ---
MAIN_WINDOW = {
    "title": f"{APP_NAME} v{APP_VERSION}",
    "width": 480,
    "height": 640,
    "prompt": "Tap anywhere",
    "busy_text": "Working...",
}

# --- Logging ---
LOGGING = {
    "level": os.getenv("HELLO_THREADS_LOG_LEVEL", "INFO"),
    "file": os.getenv("HELLO_THREADS_LOG_FILE", ""),
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}
