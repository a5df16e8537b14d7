"""Client configuration loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_bearer: str = ""  # falls back to supabase_key when empty

    # REST collection
    notes_table: str = "notes"
    request_timeout: float = 30.0

    log_level: str = "INFO"
    metrics_port: int = 9108  # 0 disables the /metrics endpoint

    @property
    def rest_url(self) -> str:
        """Base URL of the PostgREST API."""
        return f"{self.supabase_url.rstrip('/')}/rest/v1"

    @property
    def collection_url(self) -> str:
        """URL of the notes collection resource."""
        return f"{self.rest_url}/{self.notes_table}"

    @property
    def bearer_token(self) -> str:
        """Secret sent in the Authorization header."""
        return self.supabase_bearer or self.supabase_key
