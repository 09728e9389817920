import os
import datetime

from shotline.app.utils import dbhelpers
from shotline.app.utils.env import envtobool, envtoint

PROPAGATE_EXCEPTIONS = True
DEBUG = envtobool("DEBUG", False)
DEBUG_PORT = envtoint("DEBUG_PORT", 5000)

APP_NAME = "Shotline"
SECRET_KEY = os.getenv("SECRET_KEY", "mysecretkey")

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
JWT_ACCESS_TOKEN_EXPIRES = datetime.timedelta(
    hours=envtoint("JWT_ACCESS_TOKEN_HOURS", 24)
)
JWT_REFRESH_TOKEN_EXPIRES = datetime.timedelta(
    days=envtoint("JWT_REFRESH_TOKEN_DAYS", 15)
)
JWT_TOKEN_LOCATION = ["headers", "cookies"]
JWT_REFRESH_COOKIE_PATH = "/auth/refresh-token"
JWT_COOKIE_CSRF_PROTECT = False
JWT_SESSION_COOKIE = False
JWT_COOKIE_SAMESITE = "Lax"
JWT_IDENTITY_CLAIM = "sub"

DATABASE = {
    "drivername": os.getenv("DB_DRIVER", "postgresql+psycopg"),
    "host": os.getenv("DB_HOST", "localhost"),
    "port": os.getenv("DB_PORT", "5432"),
    "username": os.getenv("DB_USERNAME", "postgres"),
    "password": os.getenv("DB_PASSWORD", "mysecretpassword"),
    "database": os.getenv("DB_DATABASE", "shotlinedb"),
}
SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL") or dbhelpers.get_db_uri(
    DATABASE
)
SQLALCHEMY_TRACK_MODIFICATIONS = False
SQLALCHEMY_ENGINE_OPTIONS = {
    "pool_pre_ping": envtobool("DB_POOL_PRE_PING", True),
}
if dbhelpers.is_postgresql(SQLALCHEMY_DATABASE_URI):
    SQLALCHEMY_ENGINE_OPTIONS["pool_size"] = envtoint("DB_POOL_SIZE", 30)
    SQLALCHEMY_ENGINE_OPTIONS["max_overflow"] = envtoint(
        "DB_MAX_OVERFLOW", 60
    )

CACHE_TYPE = os.getenv("CACHE_TYPE", "SimpleCache")
CACHE_DEFAULT_TIMEOUT = envtoint("CACHE_DEFAULT_TIMEOUT", 300)
CACHE_REDIS_HOST = os.getenv("KV_HOST", "localhost")
CACHE_REDIS_PORT = envtoint("KV_PORT", 6379)

NB_RECORDS_PER_PAGE = envtoint("NB_RECORDS_PER_PAGE", 100)

EVENT_HANDLERS_FOLDER = os.getenv(
    "EVENT_HANDLERS_FOLDER", os.path.join(os.getcwd(), "event_handlers")
)

LOGS_MODE = os.getenv("LOGS_MODE", "default")
LOGS_LEVEL = os.getenv("LOGS_LEVEL", "INFO")
LOGS_HOST = os.getenv("LOGS_HOST", "localhost")
LOGS_PORT = envtoint("LOGS_PORT", 12201)

MIN_PASSWORD_LENGTH = envtoint("MIN_PASSWORD_LENGTH", 8)
