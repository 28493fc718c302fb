# config.py

import os
from dotenv import load_dotenv

load_dotenv()


# --- Server ---
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "console").lower()  # console | json

# --- Request limits ---
MAX_PASSWORD_LENGTH = int(os.getenv("MAX_PASSWORD_LENGTH", "4096"))

# --- CORS ---
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
