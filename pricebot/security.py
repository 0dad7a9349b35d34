"""
Discord request signature verification.

Discord signs every interaction callback with the application's Ed25519 key:
    X-Signature-Ed25519   hex signature over (timestamp + raw body)
    X-Signature-Timestamp timestamp string
Anything missing or not verifiable is rejected.
"""

import logging
from typing import Mapping, Optional

from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Signature-Ed25519"
TIMESTAMP_HEADER = "X-Signature-Timestamp"


def get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Case-insensitive header lookup for any mapping"""
    value = headers.get(name)
    if value is not None:
        return value
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def verify_signature(body: bytes, signature: str, timestamp: str, public_key: str) -> bool:
    """Verify a detached Ed25519 signature over timestamp + body"""
    if not public_key:
        logger.error("DISCORD_PUBLIC_KEY is not configured")
        return False
    try:
        verify_key = VerifyKey(bytes.fromhex(public_key))
        verify_key.verify(timestamp.encode() + body, bytes.fromhex(signature))
        return True
    except BadSignatureError:
        logger.warning("Request signature did not verify")
        return False
    except (ValueError, TypeError) as e:
        # bad hex or wrong key/signature length
        logger.warning(f"Malformed signature or public key: {e}")
        return False


def verify_request(headers: Mapping[str, str], body: bytes, public_key: str) -> bool:
    signature = get_header(headers, SIGNATURE_HEADER)
    timestamp = get_header(headers, TIMESTAMP_HEADER)
    if not signature or not timestamp:
        logger.warning("Missing signature headers")
        return False
    return verify_signature(body, signature, timestamp, public_key)
