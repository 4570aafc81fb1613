from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Server Configuration
    PROJECT_NAME: str = "Agent Runtime Relay"
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Agent Configuration
    # Region of the Bedrock endpoint backing the agent
    AWS_REGION: str = "us-east-1"
    MODEL_ID: Optional[str] = None  # None lets the SDK pick its default model
    SYSTEM_PROMPT: Optional[str] = None
    RESPONSE_FORMAT: Literal["text", "structured"] = "structured"

    # Logging
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    # Environment
    ENV: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

settings = Settings()
