"""Local persistence for bitmap payloads.

The existence check and the write are separate filesystem operations, so a
file created by another process in between is overwritten. No locking is
attempted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from randomorg_client.params import BitmapFormat

logger = logging.getLogger("randomorg_client")


@dataclass(frozen=True, slots=True)
class BitmapSaveResult:
    """Outcome of :func:`save_bitmap`.

    Attributes:
        path: The target path, ``<base>.<format>``.
        written: Whether the payload was written.
        message: Human-readable description of what happened.
    """

    path: Path
    written: bool
    message: str


def bitmap_target(base_path: str | Path, fmt: BitmapFormat) -> Path:
    """Return the save target for *base_path* with the format extension appended."""
    return Path(f"{base_path}.{fmt.value}")


def save_bitmap(
    data: bytes,
    base_path: str | Path,
    fmt: BitmapFormat,
    overwrite: bool = False,
) -> BitmapSaveResult:
    """Write *data* to ``<base_path>.<fmt>`` unless that file already exists.

    An existing target without *overwrite* is not an error: nothing is
    written and the returned result says so.

    Args:
        data: Complete image file contents.
        base_path: Path without extension.
        fmt: Image format; supplies the extension.
        overwrite: Replace an existing file.

    Returns:
        A BitmapSaveResult describing the outcome.

    Raises:
        OSError: If the file cannot be opened or written. The handle is
            closed before the error propagates.
    """
    path = bitmap_target(base_path, fmt)
    if path.exists() and not overwrite:
        return BitmapSaveResult(
            path=path,
            written=False,
            message=f"File {path} exists. Set overwrite=True to save.",
        )

    with open(path, "wb") as outfile:
        outfile.write(data)
    logger.info("Bitmap saved as: %s (%d bytes)", path, len(data))
    return BitmapSaveResult(path=path, written=True, message=f"File saved as: {path}")
