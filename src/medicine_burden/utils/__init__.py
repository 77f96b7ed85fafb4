# ============================================================================
# src/medicine_burden/utils/__init__.py
# ============================================================================
"""
Utility modules for the medicine burden visualizer.
"""

from .exceptions import (
    MedicineBurdenError,
    ConfigurationError,
    InvalidInputError,
    ResolutionError,
    ResolverConfigurationError,
    RateLimitError,
    ServiceUnavailableError,
    UpstreamError,
    EmptyResponseError,
    ResolverTimeoutError,
)

from .logging import (
    setup_logging,
    get_logger,
    JsonFormatter,
)

__all__ = [
    # Exceptions
    'MedicineBurdenError',
    'ConfigurationError',
    'InvalidInputError',
    'ResolutionError',
    'ResolverConfigurationError',
    'RateLimitError',
    'ServiceUnavailableError',
    'UpstreamError',
    'EmptyResponseError',
    'ResolverTimeoutError',
    # Logging
    'setup_logging',
    'get_logger',
    'JsonFormatter',
]
