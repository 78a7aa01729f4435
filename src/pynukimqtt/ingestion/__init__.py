"""Ingestion layer.

This package contains the inbound side of the bridge: envelope parsing,
topic routing, and payload decoding into typed field updates.
"""

__all__: list[str] = []
