"""Shared constants: upload defaults and user-facing messages."""

MEGABYTE = 1024 * 1024

DEFAULT_MAX_FILE_SIZE = 5 * MEGABYTE
DEFAULT_STORAGE_PATH = "uploads"
DEFAULT_ALLOWED_EXTENSIONS: tuple[str, ...] = (
    ".jpg",
    ".jpeg",
    ".png",
    ".gif",
    ".pdf",
    ".doc",
    ".docx",
)
DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Messages returned in UploadResult / DownloadResult. Internal exception text
# never reaches callers.
MSG_NO_FILE_SELECTED = "No file selected"
MSG_INVALID_FILE_NAME = "Invalid file name"
MSG_MULTIPLE_NOT_ALLOWED = "Multiple files are not allowed for this field."
MSG_UPLOAD_FAILED = "An error occurred while uploading the file."
MSG_FILE_NOT_FOUND = "File not found"
MSG_FILE_DATA_NOT_FOUND = "file data not found"
MSG_DOWNLOAD_FAILED = "An error occurred while downloading the file."
