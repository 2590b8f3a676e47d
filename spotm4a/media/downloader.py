"""
Handles the low-level streaming of a remote file to disk.
"""

import logging
import time
from contextlib import aclosing
from dataclasses import dataclass
from pathlib import Path

import aiofiles

from spotm4a.api.http import HttpTransport
from spotm4a.exceptions import StorageError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DownloadResult:
    path: Path
    bytes_written: int
    elapsed_s: float


class Downloader:
    """
    Streams a URL's body into a file chunk by chunk.

    The destination is opened (created or truncated) before the request is
    made. Nothing is cleaned up on failure.
    """

    def __init__(self, transport: HttpTransport, chunk_size: int = 131072):
        self._transport = transport
        self.chunk_size = chunk_size

    async def download_file(
        self, url: str, destination_path: Path, label: str = ""
    ) -> DownloadResult:
        """
        Downloads `url` into `destination_path`, writing each chunk as it arrives.

        Args:
            url: The direct download link.
            destination_path: File to create or truncate.
            label: Human-readable name used in the progress log line.

        Raises:
            StorageError: If the file cannot be opened or written.
            TransportError: If the request fails.
        """
        try:
            f = await aiofiles.open(destination_path, "wb")
        except OSError as e:
            raise StorageError(f"Cannot open '{destination_path}': {e}") from e

        log.info(f"downloading {label or url}")
        start_time = time.monotonic()
        bytes_written = 0
        try:
            async with aclosing(
                self._transport.get_stream(url, self.chunk_size)
            ) as stream:
                async for chunk in stream:
                    try:
                        await f.write(chunk)
                    except OSError as e:
                        raise StorageError(
                            f"Cannot write to '{destination_path}': {e}"
                        ) from e
                    bytes_written += len(chunk)
        finally:
            await f.close()

        elapsed = time.monotonic() - start_time
        return DownloadResult(destination_path, bytes_written, elapsed)
