"""Version information for media-upload-api."""

__version__ = "0.1.0"
