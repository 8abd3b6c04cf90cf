"""
Hand-authored practice datasets.

Plain Python literals only; :mod:`practice_api.app.core.datastore`
validates them into frozen records once per process.
"""
