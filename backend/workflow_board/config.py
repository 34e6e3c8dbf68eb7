"""Configuration loader for Workflow Board."""

import os
from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]


class DatabaseConfig(BaseModel):
    path: str = "/app/data/workflow-board.db"


class LoggingConfig(BaseModel):
    level: str = "info"


class SyncConfig(BaseModel):
    """Column to workflow status synchronization settings."""
    enabled: bool = True
    # Used when a project column has no icon/color of its own
    default_status_icon: str = "Circle"
    default_status_color: str = "#6B7280"
    status_type: str = "OPEN"
    # Level for the sync engine logger, independent of the global level
    log_level: str = "info"


class Config(BaseModel):
    server: ServerConfig = ServerConfig()
    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()
    sync: SyncConfig = SyncConfig()


_config: Optional[Config] = None


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from YAML file and environment variables."""
    global _config

    if _config is not None:
        return _config

    # Determine config path
    if config_path is None:
        config_path = os.environ.get("WORKFLOW_BOARD_CONFIG", "/app/config.yml")

    config_data = {}

    # Load from file if exists
    if Path(config_path).exists():
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}

    config = Config(**config_data)

    # Override with environment variables
    if os.environ.get("WORKFLOW_BOARD_DB_PATH"):
        config.database.path = os.environ["WORKFLOW_BOARD_DB_PATH"]

    if os.environ.get("WORKFLOW_BOARD_LOG_LEVEL"):
        config.logging.level = os.environ["WORKFLOW_BOARD_LOG_LEVEL"]

    if os.environ.get("WORKFLOW_BOARD_SYNC_ENABLED"):
        config.sync.enabled = os.environ["WORKFLOW_BOARD_SYNC_ENABLED"].lower() == "true"

    if os.environ.get("WORKFLOW_BOARD_SYNC_LOG_LEVEL"):
        config.sync.log_level = os.environ["WORKFLOW_BOARD_SYNC_LOG_LEVEL"]

    _config = config
    return config


def get_config() -> Config:
    """Get the loaded configuration."""
    global _config
    if _config is None:
        return load_config()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next access reloads it."""
    global _config
    _config = None
