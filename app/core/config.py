import os


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# ✅ Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./interview_desk.db")

# ✅ Security
SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
ALGORITHM = os.getenv("ALGORITHM", "HS256")

# ✅ Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")

# ✅ CORS
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]

# ✅ Attempts
ALLOW_REATTEMPTS = _env_flag("ALLOW_REATTEMPTS", "true")
ENFORCE_ATTEMPT_DURATION = _env_flag("ENFORCE_ATTEMPT_DURATION", "true")
ATTEMPT_GRACE_SECONDS = int(os.getenv("ATTEMPT_GRACE_SECONDS", "30"))
PASS_THRESHOLD_PERCENT = float(os.getenv("PASS_THRESHOLD_PERCENT", "60"))

# ✅ Migrations
RUN_MIGRATIONS = _env_flag("RUN_MIGRATIONS", "false")
