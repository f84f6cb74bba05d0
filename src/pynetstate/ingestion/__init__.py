"""Ingestion layer.

This package contains helpers that turn raw payloads handed over by the
transport into the normalized inputs the state store applies.
"""

__all__: list[str] = []
