import os
from dotenv import load_dotenv

load_dotenv()

# Number of saved versions kept in the history ledger. Not configurable.
HISTORY_LIMIT = 20

DEFAULT_BACKEND_URL = "https://spc-8hcz.onrender.com"


def backend_url() -> str:
    """Base URL the editor core talks to, without a trailing slash."""
    return os.getenv("DASHBOARD_BACKEND_URL", DEFAULT_BACKEND_URL).rstrip("/")


def http_timeout() -> float:
    return float(os.getenv("DASHBOARD_HTTP_TIMEOUT", "10"))


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", "uploads")
    # Uploads are multipart; JSON documents are capped separately.
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024
    MAX_DOCUMENT_BYTES = 2 * 1024 * 1024

    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")

    HISTORY_LIMIT = HISTORY_LIMIT


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///dashboard-content.db")


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "testing-secret-key-with-enough-length"
    ADMIN_USERNAME = "admin"
    ADMIN_PASSWORD = "secret"


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
