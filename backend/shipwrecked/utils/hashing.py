"""Hashing utilities for session tokens."""
import hashlib
from shipwrecked.config import settings


def hash_session_token(token: str) -> str:
    """
    Hash a session token using SHA-256 with salt.
    
    Args:
        token: The raw bearer token
        
    Returns:
        Hex digest of the hashed token
    """
    salted_token = f"{token}{settings.session_token_salt}"
    return hashlib.sha256(salted_token.encode()).hexdigest()
