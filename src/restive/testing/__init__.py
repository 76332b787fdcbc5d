"""Test utilities for restive APIs.

    from restive.testing import TestClient
"""

from restive.testing.client import TestClient

__all__ = ["TestClient"]
