from dotenv import load_dotenv
import os
from urllib.parse import quote_plus

load_dotenv()


def _database_uri():
    uri = os.getenv("SQLALCHEMY_DATABASE_URI")
    if uri:
        return uri
    host = os.getenv("DATABASE_HOST", "localhost")
    port = os.getenv("DATABASE_PORT", "3306")
    user = os.getenv("DATABASE_USERNAME", "root")
    password = quote_plus(os.getenv("DATABASE_PASSWORD", ""))
    name = os.getenv("DATABASE_NAME", "zakfit_db")
    return f"mysql+pymysql://{user}:{password}@{host}:{port}/{name}"


class Config:
    # Required: the app factory refuses to start without it.
    SECRET_KEY = os.getenv("SECRET_KEY")
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,  # Test connection before use
        'pool_recycle': 300,    # Recycle connections every 5 minutes
    }

    # Session tokens live for 10 minutes.
    TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", "600"))

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
