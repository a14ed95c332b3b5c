import os

from dotenv import load_dotenv

load_dotenv()

API_TITLE = "MediAccess Signup API"
API_HOST = os.getenv("API_HOST", "0.0.0.0")

try:
    API_PORT = int(os.getenv("API_PORT", "8000"))
except ValueError:
    raise RuntimeError(f"API_PORT must be an integer, got {os.getenv('API_PORT')!r}") from None

# Names accepted by both logging and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
if LOG_LEVEL == "WARN":
    LOG_LEVEL = "WARNING"
if LOG_LEVEL not in LOG_LEVELS:
    raise RuntimeError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {os.getenv('LOG_LEVEL')!r}")

# Validation
PASSWORD_MIN_LENGTH = 6
