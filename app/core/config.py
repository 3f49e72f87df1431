from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정 (환경변수 및 .env 파일)"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = "sqlite+aiosqlite:///./quiz_arena.db"
    environment: str = "development"
    allowed_origins: str = "http://localhost:5173"
    # QR 참가 링크에 사용할 외부 origin (없으면 요청의 base URL 사용)
    public_origin: str | None = None
    leaderboard_poll_interval_seconds: int = 5
    auto_create_tables: bool = True
    log_dir: str = "/app/logs"
    port: int = 8000

    @property
    def allowed_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


settings = Settings()
