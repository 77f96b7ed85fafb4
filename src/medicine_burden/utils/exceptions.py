# ============================================================================
# src/medicine_burden/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the medicine burden visualizer.

The burden engine itself is total over its input domain and raises none of
these. They belong to the collaborators around it: the AI name resolver,
the input analyzer and configuration loading.
"""

from typing import Optional


class MedicineBurdenError(Exception):
    """Base exception for all medicine burden errors."""
    pass


class ConfigurationError(MedicineBurdenError):
    """Invalid configuration."""
    pass


class InvalidInputError(MedicineBurdenError):
    """User input could not be turned into any medicine names."""
    pass


class ResolutionError(MedicineBurdenError):
    """Error resolving a free-text medicine name to a canonical id."""
    pass


class ResolverConfigurationError(ResolutionError):
    """Resolver is missing required settings (e.g. the API key)."""
    pass


class RateLimitError(ResolutionError):
    """Upstream model provider rejected the call with HTTP 429."""
    pass


class ServiceUnavailableError(ResolutionError):
    """Upstream provider refused the call with HTTP 402 (credits exhausted)."""
    pass


class UpstreamError(ResolutionError):
    """Upstream provider returned an unexpected non-success status."""
    def __init__(self, message: str, status: int, details: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.details = details


class EmptyResponseError(ResolutionError):
    """Upstream call succeeded but carried no message content."""
    pass


class ResolverTimeoutError(ResolutionError):
    """Upstream call did not finish within the configured timeout."""
    pass
