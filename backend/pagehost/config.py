import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)

    # Write endpoints (draft, publish, discard, rollback, create) need a token
    CMS_REQUIRE_AUTH = _env_flag("CMS_REQUIRE_AUTH", True)

    # Raw datastore error text in 500 responses
    EXPOSE_ERROR_DETAILS = _env_flag("EXPOSE_ERROR_DETAILS", False)

    SITE_BASE_URL = os.getenv("SITE_BASE_URL", "http://localhost:5000")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///pagehost-dev.db")
    CMS_REQUIRE_AUTH = _env_flag("CMS_REQUIRE_AUTH", False)
    EXPOSE_ERROR_DETAILS = _env_flag("EXPOSE_ERROR_DETAILS", True)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "testing-secret-key-with-enough-length!"
    CMS_REQUIRE_AUTH = True
    EXPOSE_ERROR_DETAILS = False
    SITE_BASE_URL = "https://pages.example.com"


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
