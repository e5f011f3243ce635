from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "image-evaluation-client"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"
    cors_origins: list[str] = ["*"]

    api_base_url: str = "http://localhost:5001/api"
    evaluate_path: str = "/evals"
    default_mime_type: str = "image/png"
    request_timeout: float = 60.0
    max_concurrent_evaluations: int = 5


settings = Settings()
