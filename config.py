from dotenv import load_dotenv
import os

load_dotenv()

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///fitlog.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Drop dead pooled connections before use and recycle idle ones
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]
    JWT_EXPIRES_HOURS = int(os.getenv("JWT_EXPIRES_HOURS", "12"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Calorie goal shown on the food diary when the user has no active goal
    DEFAULT_DAILY_CALORIE_GOAL = int(os.getenv("DEFAULT_DAILY_CALORIE_GOAL", "2000"))

    # Callable returning the server's "today"; tests swap it for a fixed date
    TODAY_PROVIDER = None


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}
