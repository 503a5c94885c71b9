"""Audio duration lookup."""

from typing import Optional

from ..utils.logging import get_logger

logger = get_logger(__name__)


def get_audio_duration(audio_path: str) -> Optional[float]:
    """Get the duration of an audio file in seconds.

    Returns None when the file cannot be measured so the caller's default
    duration applies.
    """
    try:
        import librosa

        duration = float(librosa.get_duration(path=audio_path))
    except Exception as e:
        logger.warning(f"Could not get audio duration: {e}")
        return None
    if duration <= 0:
        logger.warning(f"Audio file reports non-positive duration: {audio_path}")
        return None
    return duration
