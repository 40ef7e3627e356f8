from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    SERVICE_NAME: str = "checkin-validation-service"
    APP_ENV: str = "development"
    APP_DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    PORT: int = 3006

    # Orígenes separados por coma; en development se permiten todos
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Reglas de validación
    MAX_VALIDATION_ATTEMPTS: int = 10
    QR_CODE_LENGTH: int = 32

    # Rate limiting (slowapi)
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_STORAGE_URI: str = "memory://"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignorar campos extra en .env que no están en el modelo

settings = Settings()
