import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class EnvManager:
    """Read settings from the process environment (and a local .env file)."""

    @staticmethod
    def get_env_variable(name: str, default: Optional[str] = None) -> str:
        value = os.getenv(name)
        if value is None or value == "":
            if default is None:
                raise KeyError(f"Environment variable '{name}' is not set")
            return default
        return value

    @staticmethod
    def get_bool(name: str, default: bool = False) -> bool:
        value = os.getenv(name)
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}
