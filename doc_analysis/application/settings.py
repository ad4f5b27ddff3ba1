from functools import lru_cache
from typing import List, Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

# Application settings using pydantic-settings for structured configuration

class Settings(BaseSettings):
    # --- App ---
    app_name: str = "Document Analysis - TF / IDF / Cosine"
    app_env: str = "development"          # e.g., development / staging / production
    debug: bool = False

    # --- Analysis ---
    # Documents are loaded in this order; the first one is the TF target,
    # the first two are compared by cosine similarity.
    sources: List[str] = [
        "https://en.wikipedia.org/wiki/Russo-Ukrainian_War",
        "https://en.wikipedia.org/wiki/Russo-Japanese_War",
    ]
    target_word: str = "ukrainian"
    show_word_occurrences: bool = False

    # --- Web loader ---
    request_timeout_s: float = 25.0
    user_agent: str = "doc-analysis/0.1 (+tf-idf web analysis)"
    # "body" -> whole visible <body> text, "main" -> readable main content only
    extraction_mode: Literal["body", "main"] = "body"

    # pydantic v2 / pydantic-settings configuration
    model_config = SettingsConfigDict(
        env_file=".env",     # auto-load from your .env
        case_sensitive=False,  # .env keys can be upper/lower
        extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Cache settings so we don’t re-parse .env on every call."""
    return Settings()
