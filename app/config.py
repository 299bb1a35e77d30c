from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):

    # Database
    database_url: str


    # Auth/JWT
    access_token_expire_minutes: int = 60
    jwt_algorithm: str = 'HS256'
    secret_key: str

    # App
    app_name: str = 'Sitzplan Platzbuchung'
    debug: bool = False

    # Logging
    log_dir: str = "logs"
    log_file: str = "app.log"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",

    )


settings = Settings()
