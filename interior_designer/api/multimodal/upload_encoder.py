"""
Room-photo upload encoding for API clients.

Architectural role:
- Accept a file chosen through a picker or dropped on a drop zone.
- Gate it on an image media-type allow-list.
- Encode the full file content into a self-contained `data:` URI and hand it
  to the owning caller through a single-argument callback.

Processing lifecycle:
1. Take the first file of the selection.
2. Ignore it silently when its declared media type is not allowed.
3. Replace the transient preview reference.
4. Schedule an asynchronous read + base64 encode.
5. Deliver the data URI to the callback exactly once.

Clearing:
- `clear()` drops the preview and delivers `""` to the callback ("no image").

Concurrency:
- Each accepted file starts its own independent task. Selecting a second
  file before the first finishes does not cancel the earlier read, so the
  callback may fire for both in completion order.

Size validation:
- No size limit is enforced. Very large photos are read fully into memory
  and sent as-is (known gap).

Error handling strategy:
- Disallowed media types are not reported to the user; the selection is
  simply ignored.
- Read errors propagate through the returned task and drop the preview of
  the failed file.
"""

import asyncio
import base64
import logging
import mimetypes
import os
import uuid
from dataclasses import dataclass
from typing import Callable, Optional, Sequence


logger = logging.getLogger(__name__)


# ============================================================
# CONFIG
# ============================================================

ALLOWED_MEDIA_TYPES = {"image/jpeg", "image/png"}
DATA_URI_PREFIX = "data:"


# ============================================================
# FILE MODEL
# ============================================================

@dataclass
class SelectedFile:
    """A file handed to the encoder.

    Exactly one of `path` or `content` is expected to be set.
    """

    name: str
    media_type: str
    path: Optional[str] = None
    content: Optional[bytes] = None

    @classmethod
    def from_path(cls, path: str, media_type: Optional[str] = None) -> "SelectedFile":
        """Describe a local file, guessing the media type from its name."""
        if media_type is None:
            media_type, _ = mimetypes.guess_type(path)
        return cls(
            name=os.path.basename(path),
            media_type=media_type or "application/octet-stream",
            path=path,
        )

    def read_bytes(self) -> bytes:
        if self.content is not None:
            return self.content
        if not self.path:
            raise ValueError("Selected file has neither content nor path")
        with open(self.path, "rb") as f:
            return f.read()


def is_allowed_media_type(media_type: Optional[str]) -> bool:
    return (media_type or "").lower() in ALLOWED_MEDIA_TYPES


def encode_data_uri(content: bytes, media_type: str) -> str:
    """Return `data:<media_type>;base64,<payload>` for raw file bytes."""
    encoded = base64.b64encode(content).decode("ascii")
    return f"{DATA_URI_PREFIX}{media_type};base64,{encoded}"


# ============================================================
# ENCODER
# ============================================================

class UploadEncoder:
    """Upload state for one form: drop-zone flag, preview, and encoding.

    Args:
        on_image_upload: Callback receiving the data URI, or `""` on clear.
    """

    def __init__(self, on_image_upload: Callable[[str], None]):
        self.on_image_upload = on_image_upload
        self.preview_url: Optional[str] = None
        self.is_dragging = False

    def handle_drag_over(self) -> None:
        self.is_dragging = True

    def handle_drag_leave(self) -> None:
        self.is_dragging = False

    def handle_drop(self, files: Sequence[SelectedFile]) -> Optional[asyncio.Task]:
        """Accept the first dropped file; see `handle_file`."""
        self.is_dragging = False
        return self._handle_first(files)

    def handle_file_select(self, files: Sequence[SelectedFile]) -> Optional[asyncio.Task]:
        """Accept the first picked file; see `handle_file`."""
        return self._handle_first(files)

    def _handle_first(self, files: Sequence[SelectedFile]) -> Optional[asyncio.Task]:
        file = files[0] if files else None
        if file is None or not is_allowed_media_type(file.media_type):
            return None
        return self.handle_file(file)

    def handle_file(self, file: SelectedFile) -> asyncio.Task:
        """Set a fresh preview and schedule encoding of an accepted file.

        Must be called from a running event loop. Returns the encoding task.
        """
        preview_url = f"blob:{uuid.uuid4()}"
        self.preview_url = preview_url
        return asyncio.get_running_loop().create_task(self._encode(file, preview_url))

    async def _encode(self, file: SelectedFile, preview_url: str) -> str:
        try:
            content = await asyncio.to_thread(file.read_bytes)
        except Exception:
            # a later selection owns the preview now
            if self.preview_url == preview_url:
                self.preview_url = None
            raise
        data_uri = encode_data_uri(content, file.media_type.lower())
        logger.debug("Encoded %s (%d bytes)", file.name, len(content))
        self.on_image_upload(data_uri)
        return data_uri

    def clear(self) -> None:
        """Remove the current image and signal "no image" to the caller."""
        self.preview_url = None
        self.on_image_upload("")


async def encode_file(file: SelectedFile) -> str:
    """Encode one file through an `UploadEncoder` and return the result.

    Returns `""` when the file's media type is not allowed.
    """
    results = []
    encoder = UploadEncoder(results.append)
    task = encoder.handle_file_select([file])
    if task is None:
        return ""
    await task
    return results[-1]
