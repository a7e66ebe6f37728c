"""Configuration settings for the tourism CMS backend."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from project root
project_root = Path(__file__).resolve().parent.parent.parent
env_path = project_root / ".env"
load_dotenv(env_path)
load_dotenv()  # Fallback: try loading from current working directory

# "development" exposes exception text in 500 responses
APP_ENV = os.getenv("APP_ENV", "production")

# Database: DATABASE_URL wins, then DB_* parts, then a local SQLite file
DB_HOST = os.getenv("DB_HOST", "")
DB_USER = os.getenv("DB_USER", "root")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_NAME = os.getenv("DB_NAME", "tourmyholiday")
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    if DB_HOST:
        return f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}/{DB_NAME}"
    return f"sqlite:///{project_root / 'app.db'}"


DATABASE_URL = _database_url()

# Uploaded files live under UPLOAD_ROOT/<entity dir>/<filename>
UPLOAD_ROOT = os.getenv("UPLOAD_ROOT", str(project_root / "uploads"))
MAX_IMAGE_BYTES = int(os.getenv("MAX_IMAGE_BYTES", str(5 * 1024 * 1024)))
MAX_PACKAGE_IMAGE_BYTES = int(os.getenv("MAX_PACKAGE_IMAGE_BYTES", str(10 * 1024 * 1024)))

# Prefix for image URLs in responses; empty keeps them relative ("/uploads/...")
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "").rstrip("/")

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if o.strip()
]

# OpenWeatherMap passthrough
OWM_KEY = os.getenv("OWM_KEY", "")
OWM_BASE_URL = os.getenv("OWM_BASE_URL", "https://api.openweathermap.org/data/2.5/weather")
WEATHER_TIMEOUT_S = int(os.getenv("WEATHER_TIMEOUT_S", "5"))

# SMTP settings for enquiry emails
SMTP_HOST = os.getenv("SMTP_HOST", "localhost")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
SMTP_USER = os.getenv("SMTP_USER", "")
SMTP_PASSWORD = os.getenv("SMTP_PASSWORD", "")
SMTP_USE_TLS = os.getenv("SMTP_USE_TLS", "true").lower() == "true"
SMTP_FROM_EMAIL = os.getenv("SMTP_FROM_EMAIL", SMTP_USER)
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "")
