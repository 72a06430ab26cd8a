from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "MindsAI ToolsHub"
    API_STR: str = "/api"
    DATABASE_URL: str = "sqlite:///./toolshub.db"

    SECRET_KEY: str = "change-me-toolshub-session-secret"
    ALGORITHM: str = "HS256"

    # Session cookie settings
    SESSION_COOKIE_NAME: str = "toolshub.sid"
    SESSION_TTL_SECONDS: int = 7 * 24 * 60 * 60  # one week
    SESSION_COOKIE_SECURE: bool = False

    # OIDC provider (external identity collaborator)
    OIDC_ISSUER_URL: str = "https://auth.example.com/oidc"
    OIDC_CLIENT_ID: str = ""
    OIDC_CLIENT_SECRET: str = ""
    OIDC_REDIRECT_URI: str = "http://localhost:8000/api/callback"
    OIDC_SCOPE: str = "openid email profile"
    OIDC_TIMEOUT_SECONDS: float = 10.0
    OIDC_DISCOVERY_CACHE_SECONDS: int = 3600
    # Accept HS256 id_tokens signed with the client secret (providers without a JWKS)
    OIDC_ALLOW_HS256: bool = False
    LOGIN_STATE_TTL_SECONDS: int = 600

    # Server configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:8080"
    LOG_LEVEL: str = "INFO"

    SEED_INITIAL_DATA: bool = True
    TOOL_EXECUTION_DELAY_SECONDS: float = 0.0

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'

settings = Settings()
