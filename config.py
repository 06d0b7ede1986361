from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    """Publisher settings - All values are loaded from .env file automatically"""
    
    # Application Settings
    APP_NAME: str = "Clinic Report Publisher"
    APP_VERSION: str = "1.0.0"
    
    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    
    # Queue Settings
    REPORT_QUEUE_URL: str = "https://sqs.us-east-1.amazonaws.com/123456789012/pet-clinic-reports"
    REPORT_TRANSPORT: str = "sqs"  # sqs or memory
    REPORT_MESSAGE_GROUP_ID: str = "pet-clinic-reports"
    REPORT_GROUP_BY_CLINIC: bool = False
    REPORT_JSON_INDENT: Optional[int] = 2
    
    # AWS Settings (optional, boto3 falls back to its own credential chain)
    AWS_REGION: Optional[str] = None
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None
    SQS_ENDPOINT_URL: Optional[str] = None  # e.g. LocalStack
    
    # Error tracking (optional)
    SENTRY_DSN: Optional[str] = None
    
    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
        "extra": "ignore"  # Ignore extra fields from .env
    }

settings = Settings()
