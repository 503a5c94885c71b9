"""Custom exceptions for lyricsync."""

class LyricsSyncError(Exception):
    """Base exception for lyricsync."""
    pass

class ValidationError(LyricsSyncError):
    """Invalid input parameters."""
    pass

class ConfigError(LyricsSyncError):
    """Invalid configuration values."""
    pass

class LyricsError(LyricsSyncError):
    """Error reading or processing lyrics."""
    pass

class TranscriptError(LyricsSyncError):
    """Transcript payload is not a usable word list."""
    pass

class CacheError(LyricsSyncError):
    """Error with cache operations."""
    pass
