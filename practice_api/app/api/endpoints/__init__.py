"""
Endpoint modules, one per practice resource.

Handlers select records by query string (``?id=``) rather than by
path segment, and always answer with the uniform response envelope.
"""
