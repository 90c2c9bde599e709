"""Custom exceptions and error handling utilities."""
from fastapi import HTTPException, status
from typing import Optional


class AppException(Exception):
    """Base exception for application errors."""
    pass


class NotFoundError(AppException):
    """Raised when a resource is not found (or is owned by someone else)."""
    pass


class ValidationError(AppException):
    """Raised when validation fails."""
    pass


class ConflictError(AppException):
    """Raised when the request clashes with the current state of a resource."""
    pass


class DatabaseConnectionError(AppException):
    """Raised when the database does not answer the liveness probe."""
    pass


class ProjectCreationError(AppException):
    """Raised when a project insert fails after the retry policy is exhausted."""
    pass


class HackatimeError(AppException):
    """Raised when the Hackatime API cannot be reached or answers with an error."""
    pass


def internal_error(message: str = "Internal server error") -> HTTPException:
    """
    Create a generic 500 error; details stay in the server log.

    Args:
        message: Client-facing message

    Returns:
        HTTPException with 500 status
    """
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


def not_found_error(resource: str, identifier: Optional[str] = None) -> HTTPException:
    """
    Create a standardized 404 error.
    
    Args:
        resource: Name of the resource (e.g., "User", "Project")
        identifier: Optional identifier that was not found
        
    Returns:
        HTTPException with 404 status
    """
    message = f"{resource} not found"
    if identifier:
        message += f": {identifier}"
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)


def validation_error(message: str) -> HTTPException:
    """
    Create a standardized 400 validation error.
    
    Args:
        message: Validation error message
        
    Returns:
        HTTPException with 400 status
    """
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def conflict_error(message: str) -> HTTPException:
    """Create a standardized 409 conflict error."""
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=message)


def authentication_error(message: str = "Unauthorized") -> HTTPException:
    """
    Create a standardized 401 authentication error.
    
    Args:
        message: Authentication error message
        
    Returns:
        HTTPException with 401 status
    """
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=message)


def forbidden_error(message: str = "Access denied") -> HTTPException:
    """
    Create a standardized 403 forbidden error.
    
    Args:
        message: Forbidden error message
        
    Returns:
        HTTPException with 403 status
    """
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=message)


def bad_gateway_error(message: str) -> HTTPException:
    """Create a 502 error for upstream service failures."""
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=message)


def service_unavailable_error(message: str = "Service unavailable") -> HTTPException:
    """Create a 503 error for an unreachable database."""
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=message)
