"""API configuration.

Server bind address, error verbosity and request body limit, held in one
frozen dataclass.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class APIConfig:
    """API configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = APIConfig(port=3000, debug=True)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False  # Include exception text in 500 responses
    log_level: str = "info"  # Forwarded to the ASGI server

    # Limits
    max_content_length: int = 1024 * 1024  # 1 MB
