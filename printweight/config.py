from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "printweight"

    # HTTP server (printweight --api)
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8080
    CORS_ORIGINS: str = "*"  # comma separated
    CORS_MAX_AGE: int = 3600

    # Uploads
    MAX_UPLOAD_MB: int = 50

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
