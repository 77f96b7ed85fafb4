# ============================================================================
# src/medicine_burden/config/resolver_config.py
# ============================================================================
"""
Name Resolver Configuration (OpenRouter)
- API key and endpoint
- Model and sampling temperature
- Request timeout
- Attribution headers
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings

class ResolverSettings(BaseSettings):
    OPENROUTER_API_KEY: Optional[str] = Field(
        default=None,
        description="OpenRouter API key. Resolution fails with a configuration error when unset."
    )
    OPENROUTER_BASE_URL: str = Field(
        default="https://openrouter.ai/api/v1",
        description="OpenAI-compatible base URL (chat/completions is appended)"
    )
    OPENROUTER_MODEL: str = Field(
        default="deepseek/deepseek-r1-0528:free",
        description="Model used to resolve medicine names"
    )
    RESOLVER_TEMPERATURE: float = Field(
        default=0.0,
        ge=0.0, le=2.0,
        description="Sampling temperature (0.0 = deterministic)"
    )
    RESOLVER_TIMEOUT: int = Field(
        default=60,
        gt=0,
        description="Maximum time for one resolution call (seconds)"
    )
    APP_REFERER: str = Field(
        default="http://localhost:3000",
        description="Sent as HTTP-Referer for OpenRouter attribution"
    )
    APP_TITLE: str = Field(
        default="Medicine Burden Visualizer",
        description="Sent as X-Title for OpenRouter attribution"
    )

resolver_settings = ResolverSettings()
