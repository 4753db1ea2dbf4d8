"""
Service configuration.

Read once from the environment (and an optional .env file) and handed to
create_app() explicitly.
"""

import os
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel

API_NAME = "Chatbot API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "API simple para chatbot de portfolio"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080
    environment: str = "production"
    cors_origins: List[str] = ["*"]
    forwarded_allow_ips: str = "*"
    https_redirect: bool = False
    author: str = "Tu Nombre"
    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            port=int(os.getenv("PORT", "8080")),
            environment=os.getenv("APP_ENV", "production"),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            forwarded_allow_ips=os.getenv("FORWARDED_ALLOW_IPS", "*"),
            https_redirect=_env_bool("HTTPS_REDIRECT", False),
            author=os.getenv("API_AUTHOR", "Tu Nombre"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
