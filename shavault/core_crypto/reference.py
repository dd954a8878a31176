"""
Reference Cross-Check

Compares the from-scratch SHA-256 against the SHA-256 shipped with the
`cryptography` package and against published test vectors.

Features:
- Reference digest via cryptography's hash primitives
- NIST / common known-answer vectors
- Self test over known answers plus caller-supplied messages
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from cryptography.hazmat.primitives import hashes

from .sha256 import sha256


# ============================================================================
# Known Answers
# ============================================================================

KNOWN_ANSWERS: Tuple[Tuple[bytes, str], ...] = (
    (b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
    (b"hello", "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"),
    (b"The quick brown fox jumps over the lazy dog",
     "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592"),
)


# ============================================================================
# Reference Implementation
# ============================================================================

def reference_digest(data: bytes) -> bytes:
    """
    Compute SHA-256 with the `cryptography` package.

    Args:
        data: Input bytes to hash

    Returns:
        32-byte digest
    """
    hasher = hashes.Hash(hashes.SHA256())
    hasher.update(bytes(data))
    return hasher.finalize()


def verify_against_reference(data: bytes) -> bool:
    """Return True if our digest of data matches the reference digest."""
    return sha256(data) == reference_digest(data)


# ============================================================================
# Self Test
# ============================================================================

@dataclass
class SelfTestResult:
    """Outcome of checking one message."""
    message: bytes
    expected: str
    actual: str

    @property
    def passed(self) -> bool:
        return self.expected == self.actual

    def __str__(self) -> str:
        preview = self.message[:50]
        suffix = '...' if len(self.message) > 50 else ''
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] {preview!r}{suffix} -> {self.actual}"


def run_self_test(extra: Iterable[bytes] = ()) -> List[SelfTestResult]:
    """
    Check the known-answer vectors, then each extra message against the
    reference implementation.

    Args:
        extra: Additional messages to cross-check

    Returns:
        One SelfTestResult per checked message
    """
    results = [
        SelfTestResult(message=message, expected=expected, actual=sha256(message).hex())
        for message, expected in KNOWN_ANSWERS
    ]

    for message in extra:
        results.append(SelfTestResult(
            message=message,
            expected=reference_digest(message).hex(),
            actual=sha256(message).hex(),
        ))

    return results
