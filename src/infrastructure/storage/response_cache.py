"""On-disk HTTP response cache organised into named buckets.

Layout:
    <root>/<bucket>/<sha256(url)>.body   raw response body
    <root>/<bucket>/<sha256(url)>.json   url, headers and cached_at

Buckets mirror the runtime caches of the client (API responses, images,
static assets). All methods are synchronous filesystem calls; async callers
run them in a worker thread.
"""

import hashlib
import json
import shutil
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path


@dataclass(frozen=True, slots=True, kw_only=True)
class CachedResponse:
    """Response read back from a bucket."""

    url: str
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)
    cached_at: str | None = None


def _validate_bucket(bucket: str) -> str:
    if not bucket or bucket in (".", "..") or "/" in bucket or "\\" in bucket:
        raise ValueError(f"Invalid bucket name: {bucket!r}")
    return bucket


def _entry_stem(url: str) -> str:
    return hashlib.sha256(url.encode("utf-8")).hexdigest()


class ResponseCache:
    """Named-bucket response cache rooted at a directory.

    A missing root directory means an empty cache, not an error.
    """

    def __init__(self, root: Path) -> None:
        self._root = Path(root).expanduser()

    @property
    def root(self) -> Path:
        return self._root

    def buckets(self) -> list[str]:
        """Names of existing buckets, sorted."""
        if not self._root.is_dir():
            return []
        return sorted(entry.name for entry in self._root.iterdir() if entry.is_dir())

    def put(
        self,
        bucket: str,
        url: str,
        body: bytes,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Store a response, replacing any previous entry for url.

        Raises:
            ValueError: If bucket is not a plain directory name.
        """
        directory = self._root / _validate_bucket(bucket)
        directory.mkdir(parents=True, exist_ok=True)
        stem = _entry_stem(url)
        (directory / f"{stem}.body").write_bytes(body)
        meta = {
            "url": url,
            "headers": headers or {},
            "cached_at": datetime.now(UTC).isoformat(),
        }
        (directory / f"{stem}.json").write_text(json.dumps(meta), encoding="utf-8")

    def get(self, bucket: str, url: str) -> CachedResponse | None:
        """Read a response back, or None if it is not cached."""
        directory = self._root / _validate_bucket(bucket)
        stem = _entry_stem(url)
        body_path = directory / f"{stem}.body"
        meta_path = directory / f"{stem}.json"
        if not body_path.is_file() or not meta_path.is_file():
            return None

        meta = json.loads(meta_path.read_text(encoding="utf-8"))
        return CachedResponse(
            url=meta.get("url", url),
            body=body_path.read_bytes(),
            headers=meta.get("headers", {}),
            cached_at=meta.get("cached_at"),
        )

    def delete_bucket(self, bucket: str) -> bool:
        """Delete a bucket and everything in it.

        Returns:
            bool: True if the bucket existed.

        Raises:
            OSError: If the bucket cannot be removed.
        """
        directory = self._root / _validate_bucket(bucket)
        if not directory.exists():
            return False
        shutil.rmtree(directory)
        return True
