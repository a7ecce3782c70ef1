"""Application configuration classes."""

import os

from dotenv import load_dotenv


load_dotenv()


def _parse_port(raw: str) -> int:
    """Accept both ``3000`` and ``:3000`` forms."""
    return int(raw.rpartition(":")[2])


def build_database_url() -> str:
    """Build the SQLAlchemy URL from ``DATABASE_URL`` or the ``DB_*`` variables."""
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    user = os.getenv("DB_USER", "postgres")
    password = os.getenv("DB_PASSWORD", "postgres")
    host = os.getenv("DB_HOST", "localhost")
    port = os.getenv("DB_PORT", "5432")
    name = os.getenv("DB_NAME", "tasktracker")
    return f"postgresql+psycopg://{user}:{password}@{host}:{port}/{name}"


class Config:
    """Base configuration."""

    # Application
    APP_NAME = os.getenv("APP_NAME", "tasktracker")
    # Flask reserves SERVER_NAME for URL building
    SERVER_HEADER = os.getenv("SERVER_NAME", "tasktracker")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "info")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = _parse_port(os.getenv("PORT", "3000"))
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Database
    SQLALCHEMY_DATABASE_URI = build_database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "pool_recycle": 300,
    }


class TestConfig(Config):
    """Test configuration."""

    TESTING = True
    DEBUG = True
    LOG_LEVEL = "debug"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS: dict = {}
