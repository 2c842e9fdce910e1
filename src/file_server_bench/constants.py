# Constants
BLOCK_SIZE = 1024  # bytes per generated block
DEFAULT_FILE_SIZE = 1024  # bytes
DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_ITERATIONS = 1

# Server endpoints
UPLOAD_ENDPOINT = "upload"
DOWNLOAD_ENDPOINT = "download"
DOWNLOAD_CHUNKED_ENDPOINT = "download-chunked"

# Operation kinds
OP_UPLOAD = "upload"
OP_DOWNLOAD = "download"
