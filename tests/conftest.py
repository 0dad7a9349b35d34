"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest
from nacl.signing import SigningKey

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def signing_key():
    return SigningKey.generate()


@pytest.fixture
def public_key_hex(signing_key):
    return signing_key.verify_key.encode().hex()


@pytest.fixture
def sign(signing_key):
    """Return a helper producing Discord-style signature headers for a body."""
    def _sign(body: bytes, timestamp: str = "1700000000"):
        signature = signing_key.sign(timestamp.encode() + body).signature.hex()
        return {
            "X-Signature-Ed25519": signature,
            "X-Signature-Timestamp": timestamp,
        }
    return _sign
