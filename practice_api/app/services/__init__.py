"""
Service layer.

Each service answers queries against one immutable dataset and
simulates writes by computing the record a write would produce without
storing it.  Handlers depend on services only through the
``get_*_service`` dependencies, so tests can inject other datasets.
"""
