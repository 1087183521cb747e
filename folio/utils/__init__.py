"""
Shared utilities for Folio.

Common functionality used across contexts:
- Logger setup
- Timestamps
- LLM providers
"""

from folio.utils.timestamp import format_timestamp, now_ms

__all__ = ["format_timestamp", "now_ms"]
