from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    """Application configuration settings"""
    
    # Application
    app_name: str = "Shastri Campus Portal"
    debug: bool = True
    api_version: str = "v1"
    
    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    
    # CORS
    cors_origins: str = "http://localhost:5173,http://localhost:3000"
    
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.cors_origins.split(",")]
    
    # Key-value storage
    storage_backend: Literal["memory", "sqlite", "null"] = "memory"
    storage_path: str = "./data/portal_storage.db"
    # Browsers cap localStorage at roughly 5 million characters per origin
    storage_quota_chars: int = 5_000_000
    
    # Cross-portal sync
    auto_sync_enabled: bool = True
    sync_interval_seconds: float = 60.0
    
    # Demo data
    seed_demo_data: bool = False
    
    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
