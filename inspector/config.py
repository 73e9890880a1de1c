"""
Source Inspector Configuration — pydantic-settings based.

Values come from environment variables (case-insensitive) or a .env file.
Every value has a default, so the engine runs with no configuration at all.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── Scanning ──
    source_extension: str = Field(
        default=".php", description="File extension analyzed by tree scans"
    )
    max_file_size_bytes: int = Field(
        default=2_000_000, description="Max file size the file reader accepts (bytes)"
    )
    max_scan_line_length: int = Field(
        default=4000,
        description="Only this many characters of a line are matched against rules",
    )
    max_workers: int | None = Field(
        default=None,
        description="Thread pool size for tree scans; None uses the CPU count",
    )

    # ── Diagnostics ──
    context_radius: int = Field(
        default=5, description="Lines of context shown before and after an error line"
    )
    debug_log_path: str = Field(
        default="wp-content/debug.log", description="Host platform debug log"
    )
    debug_log_lines: int = Field(
        default=100, description="Lines read from the end of the debug log"
    )

    # ── Cache ──
    cache_ttl_seconds: int = Field(
        default=3600, description="Time-to-live for cached file reports"
    )
    cache_max_entries: int = Field(
        default=1024, description="Reports kept before the oldest is evicted"
    )

    # ── Server ──
    port: int = Field(default=5001, description="Server port")
    host: str = Field(default="0.0.0.0", description="Server bind host")
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )
    api_base_path: str = Field(
        default="/", description="Path prefix stripped by the Lambda handler"
    )

    # ── Audit ──
    audit_enabled: bool = Field(default=True, description="Write audit events")
    audit_log_path: str = Field(
        default="audit.jsonl", description="Path to JSON-lines audit log file"
    )

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
