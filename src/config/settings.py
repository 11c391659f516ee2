from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings
from fastapi_mail import ConnectionConfig


class Settings(BaseSettings):
    ENVIRONMENT: str = "development"
    PORT: int = 3000
    CLIENT_ORIGIN: str = "*"

    # Gmail SMTP account used to deliver contact form notifications
    GMAIL_USER: Optional[str] = None
    GMAIL_APP_PASSWORD: Optional[str] = None
    MAIL_SERVER: str = "smtp.gmail.com"
    MAIL_PORT: int = 587
    MAIL_STARTTLS: bool = True
    MAIL_SSL_TLS: bool = False
    MAIL_FROM_NAME: Optional[str] = None
    CONTACT_FORM_RECIPIENT: Optional[str] = None

    MAILCHIMP_API_KEY: str = ""
    MAILCHIMP_SERVER_PREFIX: str = ""
    MAILCHIMP_AUDIENCE_ID: Optional[str] = None
    MAILCHIMP_TIMEOUT_SECONDS: float = 10.0

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CLIENT_ORIGIN.split(",") if origin.strip()]

    @property
    def contact_recipient(self) -> Optional[str]:
        return self.CONTACT_FORM_RECIPIENT or self.GMAIL_USER

    @property
    def mail_configured(self) -> bool:
        return bool(self.GMAIL_USER and self.GMAIL_APP_PASSWORD)

    @property
    def mail_config(self) -> ConnectionConfig:
        return ConnectionConfig(
            MAIL_USERNAME=self.GMAIL_USER,
            MAIL_PASSWORD=self.GMAIL_APP_PASSWORD,
            MAIL_FROM=self.GMAIL_USER,
            MAIL_FROM_NAME=self.MAIL_FROM_NAME,
            MAIL_PORT=self.MAIL_PORT,
            MAIL_SERVER=self.MAIL_SERVER,
            MAIL_STARTTLS=self.MAIL_STARTTLS,
            MAIL_SSL_TLS=self.MAIL_SSL_TLS,
            USE_CREDENTIALS=True
        )

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process and shared read-only afterwards."""
    return Settings()
