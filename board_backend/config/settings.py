"""Application configuration settings"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

DEFAULT_IMAGE_NAME = "defaultImage.png"


class Config:
    # App settings
    APP_ENV = os.getenv("APP_ENV", "development")
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # File upload
    UPLOAD_PATH = os.getenv("FILE_LOCAL_UPLOAD_PATH", "uploads")
    BOARD_IMAGE_DIR = os.getenv("BOARD_IMAGE_DIR", "boards")

    # Pagination
    BOARD_DEFAULT_PAGE_SIZE: int = int(os.getenv("BOARD_DEFAULT_PAGE_SIZE", "10"))
    BOARD_MAX_PAGE_SIZE: int = int(os.getenv("BOARD_MAX_PAGE_SIZE", "100"))

    # Postgresql Database settings (read by Prisma from the environment)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    UPLOAD_PATH = os.getenv("FILE_LOCAL_UPLOAD_PATH", "test-uploads")


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])


@dataclass(frozen=True)
class BoardSettings:
    """
    Settings the board use cases depend on.

    Built once from Config and handed to handlers through DI, so nothing in
    the application layer reads environment state directly.
    """

    upload_path: str

    @property
    def default_image_url(self) -> str:
        return f"{self.upload_path.rstrip('/')}/{DEFAULT_IMAGE_NAME}"

    @classmethod
    def from_config(cls, cfg: type[Config] = Config) -> "BoardSettings":
        return cls(upload_path=cfg.UPLOAD_PATH)
