import os

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=f"{os.getenv('TARGET', 'dev')}.env")

    db_user: str = "postgres"
    db_password: str = "1234"
    db_ip: str = "postgres"
    db_port: int = 5432
    db_name: str = "collabry_db"
    db_echo: bool = False
    redis_ip: str = "redis"
    redis_port: int = 6379
    secret: str = "YOUR_SECRET"
    log_level: str = "INFO"


settings = Settings()
