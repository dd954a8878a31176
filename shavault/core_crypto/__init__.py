# Core Cryptography Module
"""
From-scratch SHA-256 (FIPS 180-4):
- Padding, block iteration, message schedule, compression
- Reference cross-check against the `cryptography` package
"""

from .sha256 import (
    BLOCK_SIZE,
    DIGEST_SIZE,
    H_INITIAL,
    K,
    digest,
    sha256,
    sha256_hex,
    sha256_string,
)

__all__ = [
    'BLOCK_SIZE',
    'DIGEST_SIZE',
    'H_INITIAL',
    'K',
    'digest',
    'sha256',
    'sha256_hex',
    'sha256_string',
]
