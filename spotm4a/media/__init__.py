"""
Media Processing Layer.

This package is responsible for resolving audio download links and streaming
the resulting files to disk.
"""

from .converter import AudioConverter
from .downloader import Downloader, DownloadResult

__all__ = ["AudioConverter", "Downloader", "DownloadResult"]
