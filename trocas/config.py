import os

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
INSTANCE_DIR = os.path.join(BASE_DIR, "instance")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")

    # assinatura dos tokens Bearer
    JWT_SECRET = os.getenv("JWT_SECRET", "dev-jwt-secret-change-me")
    JWT_EXPIRES_DAYS = int(os.getenv("JWT_EXPIRES_DAYS", "7"))

    BACKEND_PORT = int(os.getenv("BACKEND_PORT", "3333"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    DB_PATH = os.path.join(INSTANCE_DIR, "trocas.db")

    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL",
        "sqlite:///" + DB_PATH.replace("\\", "/"),
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    DEBUG = False
    TESTING = False


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    # sem valor padrão: create_app recusa subir sem segredo
    JWT_SECRET = os.getenv("JWT_SECRET")


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET = "test-jwt-secret"
    LOG_LEVEL = "WARNING"


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}


def config_name_from_env() -> str:
    """APP_ENV (ou NODE_ENV) -> chave do dicionário ``config``."""
    env = (os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "development").strip().lower()
    if env == "test":
        return "testing"
    return env if env in config else "default"
