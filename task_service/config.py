from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the repo root .env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")

HOST = os.getenv("TASKS_HOST", "0.0.0.0")
PORT = int(os.getenv("TASKS_PORT", "8080"))
LOG_LEVEL = os.getenv("TASKS_LOG_LEVEL", "INFO").upper()

_cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:3000")
CORS_ORIGINS = [origin.strip() for origin in _cors_origins.split(",") if origin.strip()]
