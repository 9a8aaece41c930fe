from pydantic_settings import BaseSettings, SettingsConfigDict

from canvas_api.connector.types import ConnectorOptions


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Canvas API
    canvas_url: str = ""
    canvas_tokens: str = ""  # comma-separated; leave empty for cookie-based (anonymous) access
    canvas_max_connections: int = 10
    canvas_timeout_seconds: float = 20.0
    canvas_page_size: int = 1000

    # Domain defaults
    default_course_time_zone: str = "America/Chicago"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # set True in production for structured JSON logs

    @property
    def token_list(self) -> list[str] | None:
        """Bearer tokens, or None when no token is configured."""
        tokens = [t.strip() for t in self.canvas_tokens.split(",") if t.strip()]
        return tokens or None

    def connector_options(self) -> ConnectorOptions:
        return ConnectorOptions(
            max_connections=self.canvas_max_connections,
            timeout_seconds=self.canvas_timeout_seconds,
            page_size=self.canvas_page_size,
        )


settings = Settings()
