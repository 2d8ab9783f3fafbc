"""
Filesystem-backed attachment store.

Files land under STORAGE_BASE_PATH and are served by the app at /storage.
"""

import asyncio
from pathlib import Path
from typing import Optional

from legalconnect.core.config import get_settings
from legalconnect.core.exceptions import InfrastructureError
from legalconnect.interfaces.storage_provider import IStorageProvider


class LocalStorageProvider(IStorageProvider):
    """Stores chat attachments on local disk."""

    def __init__(self, base_path: Optional[str] = None):
        self.root = Path(base_path or "./storage")
        self.root.mkdir(parents=True, exist_ok=True)

    async def upload(self, path: str, data: bytes, content_type: Optional[str] = None) -> str:
        target = self._resolve_path(path)

        def _write() -> None:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)

        # Disk I/O runs off the event loop so callers can time it out.
        try:
            await asyncio.to_thread(_write)
        except OSError as e:
            raise InfrastructureError(f"Could not store {path}: {e}") from e
        return path

    def get_public_url(self, path: str) -> str:
        """URL under the /storage mount of this backend."""
        return f"{get_settings().BASE_URL.rstrip('/')}/storage/{path}"

    def _resolve_path(self, path: str) -> Path:
        # Keep every stored file inside the storage root.
        root = self.root.resolve()
        resolved = (root / path).resolve()
        if root != resolved and root not in resolved.parents:
            raise InfrastructureError(f"Path escapes storage root: {path}")
        return resolved
