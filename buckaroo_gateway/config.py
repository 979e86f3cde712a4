"""Client configuration via environment variables."""

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    test_mode: bool = True
    live_host: str = "checkout.buckaroo.nl"
    test_host: str = "testcheckout.buckaroo.nl"
    log_level: str = "INFO"
    strict_amounts: bool = False  # raise instead of warn on debit/credit misuse
    audit_enabled: bool = False
    audit_database_url: str = "sqlite+aiosqlite:///./buckaroo_audit.db"
    mock_failure_rate: float = 0.0
    mock_latency_ms: int = 0
    max_retries: int = 3
    retry_base_delay: float = 1.0

    model_config = {"env_prefix": "BUCKAROO_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Apply the package log format to the root logger."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
