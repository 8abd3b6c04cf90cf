"""
HTTP layer: the resource router and request parsing helpers.

Each resource module in ``endpoints`` exposes an ``APIRouter`` with
GET/POST/PUT/DELETE handlers on its collection path.  ``router.py``
aggregates them and ``main.create_app`` mounts the result under the
configured API prefix.
"""
