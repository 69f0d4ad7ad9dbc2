import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./university.db")

# Comma separated list, e.g. "http://localhost:5173,http://localhost:3000"
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

SEED_DATABASE = os.getenv("SEED_DATABASE", "false").lower() in ("1", "true", "yes")
