import os
from datetime import timedelta

from dotenv import load_dotenv


load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///board.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(
        minutes=int(os.getenv("JWT_ACCESS_TOKEN_MINUTES", "15"))
    )
    JWT_REFRESH_TOKEN_EXPIRES = timedelta(
        days=int(os.getenv("JWT_REFRESH_TOKEN_DAYS", "30"))
    )

    MINIO_ENDPOINT = os.getenv("MINIO_ENDPOINT", "localhost:9000")
    MINIO_ACCESS_KEY = os.getenv("MINIO_ACCESS_KEY", "admin")
    MINIO_SECRET_KEY = os.getenv("MINIO_SECRET_KEY", "supersecret")
    MINIO_BUCKET = os.getenv("MINIO_BUCKET", "board")
    MINIO_SECURE = _env_bool("MINIO_SECURE", False)
    MINIO_PUBLIC_READ = _env_bool("MINIO_PUBLIC_READ", True)
    MINIO_CONNECT_TIMEOUT = float(os.getenv("MINIO_CONNECT_TIMEOUT", "5"))
    MINIO_READ_TIMEOUT = float(os.getenv("MINIO_READ_TIMEOUT", "20"))
    MINIO_HTTP_POOL_MAXSIZE = int(os.getenv("MINIO_HTTP_POOL_MAXSIZE", "32"))
    MINIO_PUBLIC_BASE_URL = os.getenv(
        "MINIO_PUBLIC_BASE_URL",
        "http://127.0.0.1:9000"
    )

    # Attachment display paths are IMAGE_PREFIX + "{namespace}/{post_id}/{name}".
    IMAGE_PREFIX = os.getenv(
        "IMAGE_PREFIX",
        f"{MINIO_PUBLIC_BASE_URL.rstrip('/')}/{MINIO_BUCKET}/"
    )
    BOARD_OBJECT_NAMESPACE = os.getenv("BOARD_OBJECT_NAMESPACE", "prj3/board")
    BOARD_PAGE_SIZE = int(os.getenv("BOARD_PAGE_SIZE", "10"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
