#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Saweria Discord Relay - Custom Exception Hierarchy
Structured error handling for startup and configuration faults
"""

# ============================================================================
# BASE EXCEPTIONS
# ============================================================================

class RelayBaseException(Exception):
    """
    Base exception for all relay errors.

    Carries a machine readable error code and optional structured details.
    """
    def __init__(self, message: str, error_code: str = None, details: dict = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self):
        """Convert exception to structured dictionary for logging."""
        return {
            'error': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


# ============================================================================
# CONFIGURATION EXCEPTIONS
# ============================================================================

class ConfigServiceError(RelayBaseException):
    """Base exception for all configuration service errors."""

class ConfigLoadError(ConfigServiceError):
    """Raised when configuration loading fails."""

class ConfigValidationError(ConfigServiceError):
    """Raised when configuration validation fails."""

class InvalidConfigFormatError(ConfigValidationError):
    """Raised when a configuration value has an invalid format."""

class MissingConfigError(ConfigLoadError):
    """Raised when required configuration is missing."""


# ============================================================================
# DISCORD BOT EXCEPTIONS
# ============================================================================

class BotServiceError(RelayBaseException):
    """Base exception for all bot service errors."""

class BotConnectionError(BotServiceError):
    """Raised when the bot cannot log in to Discord."""


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_exception_info(exception: Exception) -> dict:
    """
    Extract structured information from any exception.

    Args:
        exception: The exception to extract info from

    Returns:
        Dictionary with exception details
    """
    if isinstance(exception, RelayBaseException):
        return exception.to_dict()
    else:
        return {
            'error': exception.__class__.__name__,
            'error_code': exception.__class__.__name__,
            'message': str(exception),
            'details': {}
        }
