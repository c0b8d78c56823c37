"""
Core settings and environment variables for Waste Alert Hub.
Uses pydantic-settings for type-safe environment variable loading.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Create a .env file in the root directory to configure these.
    """

    # Application
    APP_NAME: str = "Waste Alert Hub"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS - Frontend URLs allowed to access this API
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173,http://localhost:8080"

    # Fixed recipient for notifications addressed to "the administrators"
    ADMIN_RECIPIENT_ID: str = "admin-1"

    # Record store
    # - STORAGE_BACKEND: "json" (default, one file per record), "memory" or "firestore"
    STORAGE_BACKEND: str = "json"
    STORE_DIR: str = "./mock_store"
    STORE_COLLECTION: str = "waste_alert_records"

    # Firebase/Firestore (only used when STORAGE_BACKEND is "firestore")
    FIREBASE_PROJECT_ID: Optional[str] = None
    FIREBASE_CREDENTIALS_PATH: Optional[str] = None  # Path to service account JSON

    # Artificial per-request delay, mimics the round trip of the demo mock API
    SIMULATED_LATENCY_MS: int = 0

    # Demo auth tokens
    TOKEN_TTL_HOURS: int = 24

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

    @property
    def cors_origins_list(self):
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
