# awg_warp_service/common/exceptions.py

class AppError(Exception):
    """Base custom exception for the application for graceful error handling."""
    pass


class ConfigurationError(AppError):
    """
    Raised for errors related to configuration, such as invalid settings
    or malformed environment variables.
    """
    pass


class ValidationError(AppError):
    """Raised when a request body or argument is missing or malformed."""
    pass


class NetworkError(AppError):
    """
    Raised for errors related to network operations, such as failed API
    requests, non-2xx responses or unreadable response bodies.
    """
    pass


class UpstreamContractError(AppError):
    """
    Raised when the WARP API answers successfully but the response is
    missing fields the configuration depends on.
    """
    pass


class CaptchaRejectedError(AppError):
    """Raised when a CAPTCHA token is missing or rejected by siteverify."""
    pass


class CryptographyError(AppError):
    """
    Raised for errors during key generation or encoding.
    """
    pass
