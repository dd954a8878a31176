#!/usr/bin/env python
"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                          SHAVAULT LIVE DEMO                                  ║
║                 SHA-256 From Scratch, Stage by Stage                         ║
╚══════════════════════════════════════════════════════════════════════════════╝

This script walks through every stage of the from-scratch SHA-256:
- Message padding (0x80 marker, zero fill, 64-bit length)
- Splitting the padded message into 512-bit blocks
- Message schedule expansion (16 -> 64 words)
- The 64-round compression function
- Digest serialization and cross-check against the reference SHA-256
"""

import sys

from shavault.core_crypto.sha256 import (
    H_INITIAL, K, pad_message, iter_blocks, create_message_schedule,
    compress, serialize_state, sha256_hex,
)
from shavault.core_crypto.reference import reference_digest, verify_against_reference


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def print_step(step_num, description):
    """Print a numbered step"""
    print(f"\n  [{step_num}] {description}")


def pause(message="Press ENTER to continue..."):
    """Pause for presenter to explain"""
    print(f"\n  [PAUSE] {message}")
    input()


def print_words(words, per_line=4):
    """Print 32-bit words as hex, a few per line"""
    for i in range(0, len(words), per_line):
        row = " ".join(f"{w:08x}" for w in words[i:i + per_line])
        print(f"  W[{i:2d}..{i + per_line - 1:2d}]  {row}")


def main():
    message_text = sys.argv[1] if len(sys.argv) > 1 else "Hello, Rust!"
    message = message_text.encode("utf-8")

    print("\n" * 2)
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 68 + "║")
    print("║" + "        SHAVAULT - SHA-256 FROM SCRATCH".center(68) + "║")
    print("║" + " " * 68 + "║")
    print("║" + "              FIPS 180-4 Live Walkthrough".center(68) + "║")
    print("║" + " " * 68 + "║")
    print("╚" + "═" * 68 + "╝")

    print(f"\n  Input data: {message_text!r} ({len(message)} bytes)")

    pause("Press ENTER to begin the demonstration...")

    print_header("PART 1: PADDING")

    padded = pad_message(message)
    print_step("1.1", "Append 0x80, zero fill to 56 mod 64, append bit length")
    print(f"\n  Original length: {len(message)} bytes ({len(message) * 8} bits)")
    print(f"  Padded length:   {len(padded)} bytes")
    print(f"  Marker byte at offset {len(message)}: 0x{padded[len(message)]:02x}")
    print(f"  Length field:    {padded[-8:].hex()}")

    pause()

    print_header("PART 2: BLOCKS")

    blocks = list(iter_blocks(padded))
    print_step("2.1", f"Padded message splits into {len(blocks)} block(s) of 64 bytes")
    for index, block in enumerate(blocks):
        print(f"  Block {index}: {block[:16].hex()}...")

    pause()

    print_header("PART 3: MESSAGE SCHEDULE AND COMPRESSION")

    state = list(H_INITIAL)
    print_step("3.1", "Initial hash state (square roots of first 8 primes)")
    print("  " + " ".join(f"{h:08x}" for h in state))
    print(f"\n  Using {len(K)} round constants (cube roots of first 64 primes)")

    for index, block in enumerate(blocks):
        w = create_message_schedule(block)
        print_step(f"3.{index + 2}", f"Block {index}: schedule (first 16 words from the block)")
        print_words(w[:16])
        print(f"  ... expanded to {len(w)} words, W[63] = {w[63]:08x}")

        compress(state, w)
        print("\n  State after 64 rounds:")
        print("  " + " ".join(f"{h:08x}" for h in state))

        pause()

    print_header("PART 4: DIGEST")

    result = serialize_state(state)
    print_step("4.1", "Serialize the 8 state words big-endian")
    print(f"\n  SHA-256 hash:        {result.hex()}")
    print(f"  sha256_hex():        {sha256_hex(message)}")
    print(f"  Reference (cryptography): {reference_digest(message).hex()}")

    matches = verify_against_reference(message)
    print(f"\n  Cross-check: {'[OK] MATCH' if matches else '[X] MISMATCH'}")

    print("\n\n" + "═" * 70)
    print("  DEMONSTRATION COMPLETE!")
    print("═" * 70)


if __name__ == "__main__":
    main()
