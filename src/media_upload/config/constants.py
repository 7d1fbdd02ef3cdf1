"""Constants shared across the media upload service."""

# 500 MiB
DEFAULT_MAX_FILE_SIZE = 500 * 1024 * 1024

# 8 KiB copy buffer bounds peak memory per file part
DEFAULT_COPY_BUFFER_SIZE = 8192

MAX_SANITIZED_NAME_LENGTH = 100

UNNAMED_BATCH = "unnamed"
UNNAMED_FILE = "unnamed_file"
UNKNOWN_FILE = "unknown"
DEFAULT_MIME_TYPE = "application/octet-stream"

BATCH_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
EXPORT_FILENAME_TEMPLATE = "uploads_export_{millis}.zip"

UPLOAD_NAME_FIELD = "uploadName"

SUPPORTED_IMAGE_TYPES = frozenset({
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/heic",
    "image/heif",
    "image/bmp",
    "image/tiff",
    "image/svg+xml",
})

SUPPORTED_VIDEO_TYPES = frozenset({
    "video/mp4",
    "video/quicktime",
    "video/x-msvideo",
    "video/x-matroska",
    "video/webm",
    "video/mpeg",
    "video/3gpp",
    "video/x-flv",
})

SUPPORTED_MEDIA_TYPES = SUPPORTED_IMAGE_TYPES | SUPPORTED_VIDEO_TYPES
