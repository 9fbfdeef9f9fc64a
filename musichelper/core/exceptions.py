"""
Custom exceptions for Music Helper

This module defines the exceptions raised by the helper functions so that
callers can tell computational failures apart from "no answer" results.
"""

from typing import Optional


class MusicHelperError(Exception):
    """Base exception for all Music Helper errors"""

    def __init__(self, message: str, details: Optional[str] = None, reference: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.reference = reference

    def __str__(self):
        parts = [self.message]
        if self.reference:
            parts.append(f"Reference: {self.reference}")
        if self.details:
            parts.append(f"Details: {self.details}")
        return " | ".join(parts)


class InvalidArgumentError(MusicHelperError, ValueError):
    """Raised when a helper is called with an argument it cannot compute on"""
    pass


class UnresolvedReferenceError(MusicHelperError):
    """Raised by resolvers when a song reference cannot be turned into a song"""

    def __init__(self, reference: str, details: Optional[str] = None):
        super().__init__("Song reference could not be resolved", details, reference)


class AudioFileError(MusicHelperError):
    """Raised when PCM samples cannot be read from an audio file"""
    pass


class ConfigurationError(MusicHelperError):
    """Raised when a configuration file is unreadable or malformed"""
    pass
