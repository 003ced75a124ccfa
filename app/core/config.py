"""
Application configuration settings
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    PROJECT_NAME: str = "Capital Gains Tax on Property Disposals"
    VERSION: str = "1.0.0"
    DATABASE_URL: str = "sqlite+aiosqlite:///./cgt_frontend.db"
    LOG_LEVEL: str = "INFO"

    # Session handling
    SESSION_TTL_SECONDS: int = 15 * 60
    SESSION_COOKIE_NAME: str = "cgtpd-session"
    SESSION_ID_HEADER: str = "X-Session-ID"
    AUTH_USER_HEADER: str = "X-Auth-User"

    # Our own externally visible base URL, used in callback links
    SELF_BASE_URL: str = "http://localhost:7020"
    SIGN_IN_URL: str = "http://localhost:9949/auth-login-stub/gg-sign-in"

    # Email verification backend
    EMAIL_VERIFICATION_URL: str = "http://localhost:9891"
    EMAIL_VERIFICATION_TEMPLATE_ID: str = "cgtpd_email_verification"
    EMAIL_LINK_EXPIRY: str = "PT2H"

    # Identity verification
    IV_URL: str = "http://localhost:9938"
    IV_UPLIFT_URL: str = "http://localhost:9948/mdtp/uplift"
    IV_ORIGIN: str = "cgtpd"
    IV_CONFIDENCE_LEVEL: int = 200

    HTTP_TIMEOUT_SECONDS: float = 10.0

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

settings = Settings()
