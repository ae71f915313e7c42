import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("APP_NAME", "Library Demo")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")

    # Logging goes to stderr; stdout is reserved for the demo output
    log_level: str = os.getenv("LOG_LEVEL", "DEBUG" if _env_flag("DEBUG") else "WARNING").upper()

    # Console output used when LIB_CLI_OUTPUT is unset: plain | json | rich
    output_mode: str = os.getenv("DEFAULT_OUTPUT_MODE", "plain").lower()


settings = Settings()
