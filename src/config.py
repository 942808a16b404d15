"""Configuration settings for TaskTracker."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_reload: bool = False

    # Store
    seed_task_name: str = "Выучить Go"

    # Logging
    log_level: str = "INFO"
    log_file: str = ""  # Empty means console only

    class Config:
        env_prefix = "TASKTRACKER_"


settings = Settings()
