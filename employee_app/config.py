import os


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///employee_app.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Log every SQL statement, mirrors the console SQL log of the demo
    SQL_LOG_ENABLED = _env_flag("SQL_LOG", True)
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQL_LOG_ENABLED = False
