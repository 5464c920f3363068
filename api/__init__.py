"""
REST API proxying recent crime data from Brottsplatskartan.

Exposes a handful of read-only endpoints that forward to the upstream
events API and optionally reshape its response.
"""

__version__ = "1.0.0"
