#!/usr/bin/env python3
"""
Render Cache

Stores rendered crosshair PNGs on disk, one file per share code, and serves
them until they are older than the configured time to live.
"""

import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Optional, Union

from cs2_crosshair.core.renderer import DEFAULT_CANVAS_SIZE, render, validate_canvas_size
from cs2_crosshair.core.sharecode import decode, is_valid_sharecode
from cs2_crosshair.errors import MalformedCode
from cs2_crosshair.utils.image_utils import is_png

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3 * 60 * 60


class RenderCache:
    """On-disk PNG cache keyed by crosshair share code."""

    def __init__(self,
                 directory: Union[str, Path] = "cache",
                 ttl_seconds: float = DEFAULT_TTL_SECONDS,
                 canvas_size: int = DEFAULT_CANVAS_SIZE):
        """Initialize the render cache.

        Args:
            directory: Directory holding cached PNG files (created on first write)
            ttl_seconds: Age after which a cached file is treated as missing
            canvas_size: Canvas size used when rendering on a miss
        """
        self.directory = Path(directory)
        self.ttl_seconds = ttl_seconds
        self.canvas_size = validate_canvas_size(canvas_size)

    def path_for(self, code: str) -> Path:
        """Get the cache file path for a share code.

        Raises:
            MalformedCode: If code is not a share code, so arbitrary input
                never reaches the filesystem
        """
        if not is_valid_sharecode(code):
            raise MalformedCode(f"Invalid share code: {code!r}")
        return self.directory / f"{code}.png"

    def _is_expired(self, path: Path, now: Optional[float] = None) -> bool:
        now = time.time() if now is None else now
        return now - path.stat().st_mtime > self.ttl_seconds

    def get(self, code: str) -> Optional[bytes]:
        """Get cached PNG bytes for a share code.

        Returns:
            PNG bytes, or None when the entry is missing, expired or unreadable
        """
        path = self.path_for(code)

        try:
            if self._is_expired(path):
                logger.debug(f"Cache entry expired: {path}")
                return None
            data = path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.error(f"Error reading cache entry {path}: {e}")
            return None

        if not is_png(data):
            logger.warning(f"Ignoring corrupt cache entry: {path}")
            return None

        logger.debug(f"Cache hit: {code}")
        return data

    def put(self, code: str, png: bytes) -> bool:
        """Store PNG bytes for a share code.

        The file is written under a temporary name and moved into place, so
        readers never see a partial image.

        Returns:
            True if stored successfully, False otherwise
        """
        path = self.path_for(code)

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(dir=self.directory, suffix='.tmp')
            try:
                with os.fdopen(fd, 'wb') as f:
                    f.write(png)
                os.replace(temp_name, path)
            except BaseException:
                os.unlink(temp_name)
                raise
        except OSError as e:
            logger.error(f"Error writing cache entry {path}: {e}")
            return False

        logger.info(f"Cached crosshair image: {path}")
        return True

    def get_or_render(self, code: str) -> bytes:
        """Get the PNG for a share code, rendering and caching it on a miss.

        Raises:
            DecodeError: If the share code cannot be decoded
        """
        cached = self.get(code)
        if cached is not None:
            return cached

        png = render(decode(code), self.canvas_size)
        self.put(code, png)
        return png

    def purge_expired(self) -> int:
        """Delete expired cache files.

        Returns:
            Number of files deleted
        """
        if not self.directory.exists():
            return 0

        now = time.time()
        removed = 0
        for path in self.directory.glob("*.png"):
            try:
                if self._is_expired(path, now):
                    path.unlink()
                    removed += 1
            except OSError as e:
                logger.warning(f"Could not purge cache entry {path}: {e}")

        if removed:
            logger.info(f"Purged {removed} expired cache entries from {self.directory}")
        return removed
