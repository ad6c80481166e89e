#!/usr/bin/env python3
"""Basic usage example for jsonblob.

This example demonstrates:
1. Encoding a JSON document into a printable envelope
2. Inspecting the envelope's transport
3. Decoding it back
4. Handling a rejected envelope
"""

from __future__ import annotations

import json

from jsonblob import DecodeError, decode, encode, peek_transport


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("jsonblob Basic Usage Example")
    print("=" * 60)
    print()

    document = {
        "user": "alice",
        "cart": [{"sku": "A-100", "qty": 2}, {"sku": "B-220", "qty": 1}],
        "coupon": None,
    }

    print("1. Encoding a document...")
    serialized = json.dumps(document, separators=(",", ":"))
    blob = encode(document)
    print(f"   JSON: {len(serialized)} chars")
    print(f"   Envelope: {len(blob)} chars")
    print(f"   {blob}")
    print()

    print("2. Inspecting the transport...")
    transport = peek_transport(blob)
    print(f"   Leading character {transport.char!r} -> {transport.name}")
    print()

    print("3. Decoding...")
    decoded = decode(blob)
    print(f"   Round-trip OK: {decoded == document}")
    print()

    print("4. Rejecting an envelope from an unknown scheme...")
    try:
        decode("1" + blob[1:])
    except DecodeError as e:
        print(f"   {type(e).__name__}: {e}")


if __name__ == "__main__":
    main()
