# shared/config.py
import os
from dotenv import load_dotenv

load_dotenv()


def _build_database_url() -> str:
    host = os.getenv("DB_HOST", "localhost")
    port = os.getenv("DB_PORT", "3306")
    user = os.getenv("DB_USER", "root")
    password = os.getenv("DB_PASSWORD", "")
    name = os.getenv("DB_NAME", "school_management")
    return f"mysql+aiomysql://{user}:{password}@{host}:{port}/{name}"


class Settings:
    """Process-wide settings read from the environment (and `.env`)."""

    def __init__(self):
        self.database_url = os.getenv("DATABASE_URL") or _build_database_url()
        self.pool_size = int(os.getenv("DB_POOL_SIZE", "10"))
        self.max_overflow = int(os.getenv("DB_MAX_OVERFLOW", "0"))
        self.port = int(os.getenv("PORT", "3000"))
        self.environment = os.getenv("ENVIRONMENT", "production").lower()
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_file = os.getenv("LOG_FILE") or None

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


settings = Settings()
