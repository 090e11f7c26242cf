import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default="false"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Content store
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "database")  # database | memory | none
    SEED_ON_STARTUP = _env_flag("SEED_ON_STARTUP", "true")

    # Editor
    DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "fr")
    RECENT_EDITS_LIMIT = 10
    SUCCESS_MESSAGE_SECONDS = 3

    # Admin context (stubbed unless explicitly required)
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-jwt-secret")
    ADMIN_AUTH_REQUIRED = _env_flag("ADMIN_AUTH_REQUIRED")

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///fondation_cms.db")

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")

class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    STORAGE_BACKEND = "memory"
    SEED_ON_STARTUP = True
    ADMIN_AUTH_REQUIRED = False

config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
