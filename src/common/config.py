import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings

# Load environment variables from the correct .env file
env_file = ".env.production" if os.getenv("APP_ENV") == "production" else ".env"
load_dotenv(env_file)

class Settings(BaseSettings):
    APP_ENV: str = "development"
    LOG_LEVEL: str = "info"

    # SendGrid settings. No defaults: presence is checked per request.
    SENDGRID_API_KEY: Optional[str] = None
    SENDGRID_FROM_EMAIL: Optional[str] = None
    SENDGRID_TO_EMAIL: Optional[str] = None
    SENDGRID_API_URL: str = "https://api.sendgrid.com/v3/mail/send"
    SENDGRID_TIMEOUT_SECONDS: float = 30.0

    # Inquiry presentation
    BRAND_NAME: str = "Everguard Intelligence"
    DISPLAY_TIMEZONE: str = "Australia/Sydney"

    # Echo toEmail/fromEmail back in the success payload
    INQUIRY_DEBUG_RESPONSE: bool = False

    @field_validator("SENDGRID_API_KEY", "SENDGRID_FROM_EMAIL", "SENDGRID_TO_EMAIL", mode="before")
    def blank_as_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

settings = Settings()
