# SHAVault
"""
SHA-256 built from scratch per FIPS 180-4.

    >>> from shavault import digest
    >>> digest(b"abc").hex()
    'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
"""

from .core_crypto.sha256 import digest, sha256, sha256_hex, sha256_string

__version__ = "1.0.0"

__all__ = [
    'digest',
    'sha256',
    'sha256_hex',
    'sha256_string',
]
