"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from food_diary.services.resolution import BarcodeConflictPolicy

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    default_user_id: int = 1
    barcode_conflict_policy: str = BarcodeConflictPolicy.FIRST_MATCH.value
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_barcode_policy(raw: str | None) -> BarcodeConflictPolicy:
    """Parse the barcode conflict policy, defaulting to first match."""
    if raw is None:
        return BarcodeConflictPolicy.FIRST_MATCH
    cleaned = raw.strip().lower().replace("-", "_")
    if not cleaned:
        return BarcodeConflictPolicy.FIRST_MATCH
    try:
        return BarcodeConflictPolicy(cleaned)
    except ValueError as exc:
        allowed = ", ".join(policy.value for policy in BarcodeConflictPolicy)
        raise ValueError(
            f"barcode_conflict_policy must be one of: {allowed}"
        ) from exc
