from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    CURRENCY: str = "INR"
    LOG_LEVEL: str = "WARNING"

    class Config:
        env_file = ".env"
        env_prefix = "SPLITLEDGER_"
        extra = "ignore"

settings = Settings()
