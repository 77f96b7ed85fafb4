# ============================================================================
# src/medicine_burden/config/base_config.py
# ============================================================================
"""
Base Configuration
- Application name and version
- CORS origins for the frontend
"""

from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings

class BaseSettingsConfig(BaseSettings):
    APP_NAME: str = Field(
        default="Medicine Burden Visualizer",
        description="Human-readable application name"
    )

    APP_VERSION: str = Field(
        default="1.0.0",
        description="Version reported by the API"
    )

    CORS_ORIGINS: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        description="Origins allowed to call the API from a browser"
    )

# Global instance
base_settings = BaseSettingsConfig()
