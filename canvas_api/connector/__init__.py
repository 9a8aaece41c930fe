"""Canvas API connection layer.

Provides async infrastructure for talking to a Canvas-style REST API with:
  - Per-connector concurrency ceiling (ConcurrencyLimiter)
  - Full-collection pagination via Link header discovery
  - Load-balanced dispatch across one connector per credential
"""
