from decouple import AutoConfig
from pathlib import Path

config = AutoConfig()


class Config:
    def __init__(self):
        # Environment
        self.ENV = config("ENV", default="development")

        # Database
        self.DB_HOST = config("DB_HOST", default="localhost")
        self.DB_PORT = config("DB_PORT", default=5432, cast=int)
        self.DB_USER = config("DB_USER", default="lokapedia")
        self.DB_PASSWORD = config("DB_PASSWORD", default="lokapedia123")
        self.DB_NAME = config("DB_NAME", default="lokapedia_db")
        self.DATABASE_URL = config("DATABASE_URL", default=None)

        # Auth
        self.SECRET_KEY = config("SECRET_KEY", default="dev-secret-key")
        self.SESSION_COOKIE_NAME = "lokapedia_session"
        self.PERMANENT_SESSION_LIFETIME = config(
            "SESSION_MAX_AGE", default=24 * 60 * 60, cast=int
        )

        # App
        self.BIND = config("BIND", default="127.0.0.1:8000")
        self.DEBUG = config("DEBUG", default=True, cast=bool)
        self.CORS_ORIGINS = config(
            "CORS_ORIGINS", default="*", cast=lambda v: [o.strip() for o in v.split(",")]
        )

        # Flask-Smorest
        self.API_TITLE = "LokaPedia Bali API"
        self.API_VERSION = "v1"
        self.OPENAPI_VERSION = "3.0.3"

        # AWS S3 (uploads)
        self.AWS_ACCESS_KEY = config("AWS_ACCESS_KEY", default=None)
        self.AWS_SECRET_KEY = config("AWS_SECRET_KEY", default=None)
        self.AWS_REGION = config("AWS_REGION", default="ap-southeast-1")
        self.AWS_S3_BUCKET = config("AWS_S3_BUCKET", default="lokapedia-uploads")
        self.CDN_DOMAIN = config("CDN_DOMAIN", default=None)
        self.MAX_UPLOAD_SIZE = config(
            "MAX_UPLOAD_SIZE", default=5 * 1024 * 1024, cast=int
        )  # bytes

        # Map link resolution
        self.MAP_LINK_TIMEOUT = config("MAP_LINK_TIMEOUT", default=10, cast=int)

        # Logging
        self.LOG_DIR = Path(config("LOG_DIR", default="logs"))
        self.LOG_LEVEL = config("LOG_LEVEL", default="INFO")

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"


settings = Config()
