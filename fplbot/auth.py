from __future__ import annotations

import hashlib
import hmac
import time
from typing import Callable

SIGN_VERSION = "v0"
MAX_REQUEST_AGE_SECS = 60 * 5


class SignatureVerifier:
    """Checks Slack request signatures (``X-Slack-Signature``).

    A request is verified only when its HMAC-SHA256 signature matches AND its
    timestamp is less than ``max_age`` seconds away from now. Both checks run
    independently, and malformed headers simply fail verification.
    """

    def __init__(
        self,
        signing_secret: str,
        max_age: int = MAX_REQUEST_AGE_SECS,
        clock: Callable[[], float] = time.time,
    ):
        self._key = signing_secret.encode("utf-8")
        self.max_age = max_age
        self.clock = clock

    def _digest(self, timestamp: str, body: bytes | str) -> bytes:
        if isinstance(body, str):
            body = body.encode("utf-8")
        base = f"{SIGN_VERSION}:{timestamp}:".encode("utf-8") + body
        return hmac.new(self._key, base, hashlib.sha256).digest()

    def compute_signature(self, timestamp: str, body: bytes | str) -> str:
        return f"{SIGN_VERSION}={self._digest(timestamp, body).hex()}"

    def is_request_time_close(self, timestamp: str | None) -> bool:
        try:
            sent_at = int(timestamp or "0")
        except ValueError:
            return False
        return abs(int(self.clock()) - sent_at) < self.max_age

    def is_signature_valid(self, timestamp: str | None, body: bytes | str, signature: str | None) -> bool:
        # drop the leading "v0=" and decode the hex digest
        try:
            expected = bytes.fromhex((signature or "")[3:])
        except ValueError:
            return False
        actual = self._digest(timestamp or "0", body)
        return hmac.compare_digest(expected, actual)

    def verify(self, timestamp: str | None, body: bytes | str, signature: str | None) -> bool:
        signature_ok = self.is_signature_valid(timestamp, body, signature)
        time_ok = self.is_request_time_close(timestamp)
        return signature_ok and time_ok
