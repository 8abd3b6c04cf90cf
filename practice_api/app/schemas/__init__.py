"""
Pydantic schema definitions for API payloads.

Each resource (cities, countries, languages) defines a frozen record
model, a create payload and a partial-update payload.  Records are
exchanged over the wire with camelCase keys.
"""
