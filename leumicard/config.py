"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    endpoint_url: str = "https://icom.yaad.net/p3/"
    password: str = ""  # Terminal password, sent as PassP
    timeout_seconds: float = 20.0
    log_level: str = "INFO"
    driver_port: int = 10019  # Default port for the test driver

    model_config = {"env_prefix": "LEUMICARD_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
