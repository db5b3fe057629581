"""Hypothesis strategies for localeroute property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules. Strategies are organized by domain:

- routing: locale spellings, locale configurations and page paths

Usage:
    from tests.strategies import locale_configs, page_paths
    from tests.strategies.routing import LOCALE_POOL, locale_spellings

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - locale_spellings, locale_configs, page_paths
"""

from .routing import (
    # Constants
    BASES,
    LOCALE_POOL,
    PAGE_SEGMENTS,
    # Strategies
    locale_configs,
    locale_lists,
    locale_spellings,
    page_paths,
)

__all__ = [
    "BASES",
    "LOCALE_POOL",
    "PAGE_SEGMENTS",
    "locale_configs",
    "locale_lists",
    "locale_spellings",
    "page_paths",
]
