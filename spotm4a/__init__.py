"""
spotm4a: download a Spotify playlist as .m4a files via YouTube.
"""

__version__ = "0.1.0"
