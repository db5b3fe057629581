"""Shared constants for localeroute.

This module provides centralized configuration constants used across the
routing and parsing packages. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Redirect status codes: live-mode HTTP status per redirect reason
- Header names: request headers consumed by the resolver
- Cache limits: memory bounds for cached locale lookups
- Input limits: size constraints on untrusted header values
- Static output: meta-refresh document template

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Redirect status codes
    "STATUS_FOUND",
    "STATUS_MOVED_PERMANENTLY",
    # Header names
    "HEADER_ACCEPT_LANGUAGE",
    "HEADER_HOST",
    "HEADER_LOCATION",
    "HEADER_X_FORWARDED_HOST",
    "HEADER_X_FORWARDED_PROTO",
    "MAX_PORT",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Input limits
    "MAX_ACCEPT_LANGUAGE_LENGTH",
    "MAX_ACCEPT_LANGUAGE_ENTRIES",
    # Quality values
    "DEFAULT_QUALITY",
    # Static output
    "META_REFRESH_TEMPLATE",
]

# ============================================================================
# REDIRECT STATUS CODES
# ============================================================================

# Fallback and default-locale redirects are temporary: the target depends on
# which translations exist right now.
STATUS_FOUND: int = 302

# Trailing-slash normalization is a permanent property of the URL space.
STATUS_MOVED_PERMANENTLY: int = 301

# ============================================================================
# HEADER NAMES
# ============================================================================

# Lookups are case-insensitive; these are the canonical spellings.
HEADER_ACCEPT_LANGUAGE: str = "Accept-Language"
HEADER_HOST: str = "Host"
HEADER_LOCATION: str = "Location"
HEADER_X_FORWARDED_HOST: str = "X-Forwarded-Host"
HEADER_X_FORWARDED_PROTO: str = "X-Forwarded-Proto"

# Highest valid TCP port; a Host header naming anything else has no usable host.
MAX_PORT: int = 65535

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached "does this token look like a locale" answers.
# First path segments of a site form a small vocabulary; 1024 covers it.
MAX_LOCALE_CACHE_SIZE: int = 1024

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Accept-Language values are untrusted client input. Browsers send well under
# 200 characters; anything past these limits is truncated before parsing.
MAX_ACCEPT_LANGUAGE_LENGTH: int = 4096
MAX_ACCEPT_LANGUAGE_ENTRIES: int = 64

# ============================================================================
# QUALITY VALUES
# ============================================================================

# RFC 9110 section 12.4.2: an omitted weight means q=1.
DEFAULT_QUALITY: float = 1.0

# ============================================================================
# STATIC OUTPUT
# ============================================================================

# Pre-rendered redirects cannot send a status code; the build emits this
# document instead. Use .format(url=...) with an HTML-escaped URL.
META_REFRESH_TEMPLATE: str = (
    "<!doctype html>"
    "<title>Redirecting to: {url}</title>"
    '<meta http-equiv="refresh" content="0;url={url}">'
    '<meta name="robots" content="noindex">'
    '<link rel="canonical" href="{url}">'
    '<body><a href="{url}">Redirecting to <code>{url}</code></a></body>'
)
