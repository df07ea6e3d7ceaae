from __future__ import annotations

from app.core.config import DEFAULT_CORS_ORIGINS, load_settings


def test_load_settings_parses_cors_origins_from_env(monkeypatch) -> None:
    monkeypatch.setenv(
        "CLEARPHRASE_CORS_ORIGINS",
        "http://127.0.0.1:4173, http://localhost:5173 ,",
    )

    settings = load_settings()

    assert settings.cors_origins == ("http://127.0.0.1:4173", "http://localhost:5173")


def test_load_settings_defaults(monkeypatch) -> None:
    for name in (
        "CLEARPHRASE_CORS_ORIGINS",
        "CLEARPHRASE_NLP_MODEL",
        "CLEARPHRASE_COMPRESS_PROPER_NOUNS",
        "CLEARPHRASE_LOG_LEVEL",
        "CLEARPHRASE_PORT",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.nlp_model == "en_core_web_sm"
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.compress_proper_nouns is True
    assert settings.log_level == "INFO"
    assert settings.port == 8000


def test_load_settings_reads_flags(monkeypatch) -> None:
    monkeypatch.setenv("CLEARPHRASE_COMPRESS_PROPER_NOUNS", "false")
    monkeypatch.setenv("CLEARPHRASE_LOG_LEVEL", "debug")
    monkeypatch.setenv("CLEARPHRASE_NLP_MODEL", "en_core_web_trf")

    settings = load_settings()

    assert settings.compress_proper_nouns is False
    assert settings.log_level == "DEBUG"
    assert settings.nlp_model == "en_core_web_trf"
