from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = ""  # empty = build from DB_* parts, else local sqlite
    db_user: str = ""
    db_password: str = ""
    db_host: str = ""
    db_port: int = 5432
    db_name: str = ""
    jwt_secret: str = ""  # required; token signing refuses to run without it
    jwt_algorithm: str = "HS256"
    bcrypt_rounds: int = 10
    host: str = "127.0.0.1"
    port: int = 3000
    cors_origins: list[str] = ["http://localhost:3000"]
    create_tables_on_startup: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
