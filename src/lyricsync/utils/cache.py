"""Cache of sync results keyed by a hash of their inputs."""

import hashlib
import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

from ..config import get_cache_dir
from ..core.models import SyncResult, TranscriptWord
from ..core.serialization import load_result_json, save_result_json
from ..exceptions import CacheError, LyricsError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class SyncCache:
    """Stores sync results as JSON files named by content hash."""

    def __init__(self, cache_dir: Optional[Path] = None):
        self.cache_dir = Path(cache_dir) if cache_dir else get_cache_dir() / "results"
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def make_key(
        text: str,
        duration: Optional[float] = None,
        transcript_words: Optional[Sequence[TranscriptWord]] = None,
        speeds: Optional[Mapping[str, float]] = None,
        **extra: Any,
    ) -> str:
        """Hash every input that can change the result."""
        payload = {
            "text": text,
            "duration": duration,
            "words": (
                None
                if transcript_words is None
                else [[w.text, w.start_ms] for w in transcript_words]
            ),
            "speeds": None if speeds is None else sorted(speeds.items()),
            "extra": {k: str(v) for k, v in sorted(extra.items())},
        }
        encoded = json.dumps(payload, sort_keys=True, ensure_ascii=False).encode("utf-8")
        return hashlib.sha256(encoded).hexdigest()

    def get_file_path(self, key: str) -> Path:
        return self.cache_dir / f"{key}.json"

    def get(self, key: str) -> Optional[SyncResult]:
        """Load a cached result; unreadable entries count as misses."""
        path = self.get_file_path(key)
        if not path.exists():
            return None
        try:
            result = load_result_json(path)
        except (OSError, json.JSONDecodeError, LyricsError) as e:
            logger.warning(f"Ignoring corrupt cache entry {path.name}: {e}")
            return None
        logger.debug(f"Cache hit for {key[:12]}")
        return result

    def put(self, key: str, result: SyncResult) -> None:
        path = self.get_file_path(key)
        try:
            save_result_json(path, result)
        except OSError as e:
            raise CacheError(f"Failed to save cache entry: {e}")
        logger.debug(f"Cached result {key[:12]}")

    def clear(self) -> int:
        """Remove all cached results and return how many were deleted."""
        removed = 0
        for path in self.cache_dir.glob("*.json"):
            try:
                path.unlink()
                removed += 1
            except OSError as e:
                logger.warning(f"Could not remove {path}: {e}")
        logger.info(f"Cleared {removed} cached results")
        return removed

    def get_cache_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        files = [p for p in self.cache_dir.glob("*.json") if p.is_file()]
        total_size = sum(p.stat().st_size for p in files)
        return {
            "cache_dir": str(self.cache_dir),
            "entry_count": len(files),
            "total_size_kb": total_size / 1024,
        }
