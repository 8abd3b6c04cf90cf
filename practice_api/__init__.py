"""
Practice Data API.

A read-only REST service over small, hand-authored datasets
(countries, cities, languages) for programming exercises, plus a thin
HTTP client for it.  The application lives in :mod:`practice_api.app`;
the client in :mod:`practice_api.client`.
"""

__version__ = "1.0.0"
