from __future__ import annotations

from dataclasses import dataclass
import os


DEFAULT_CORS_ORIGINS = ("http://127.0.0.1:4173", "http://localhost:4173")
DEFAULT_NLP_MODEL = "en_core_web_sm"


def _env_flag(name: str, default: str = "1") -> bool:
    return os.getenv(name, default).lower() not in {"0", "false", "no"}


@dataclass(frozen=True)
class Settings:
    environment: str
    app_name: str
    host: str
    port: int
    nlp_model: str = DEFAULT_NLP_MODEL
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    compress_proper_nouns: bool = True
    log_level: str = "INFO"


def load_settings() -> Settings:
    raw_cors_origins = os.getenv("CLEARPHRASE_CORS_ORIGINS", "")
    parsed_cors_origins = tuple(
        origin.strip()
        for origin in raw_cors_origins.split(",")
        if origin.strip()
    )
    return Settings(
        environment=os.getenv("CLEARPHRASE_ENV", "development"),
        app_name=os.getenv("CLEARPHRASE_APP_NAME", "clearphrase-backend"),
        host=os.getenv("CLEARPHRASE_HOST", "127.0.0.1"),
        port=int(os.getenv("CLEARPHRASE_PORT", "8000")),
        nlp_model=os.getenv("CLEARPHRASE_NLP_MODEL", DEFAULT_NLP_MODEL),
        cors_origins=parsed_cors_origins or DEFAULT_CORS_ORIGINS,
        compress_proper_nouns=_env_flag("CLEARPHRASE_COMPRESS_PROPER_NOUNS"),
        log_level=os.getenv("CLEARPHRASE_LOG_LEVEL", "INFO").upper(),
    )
