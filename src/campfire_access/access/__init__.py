"""
campfire_access.access

Entry-check domain package.

Responsibilities:
- Row interpretation and access decisions.
- Lookup service over a `RecordStore`.
- Request handling and response envelopes.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing here imports FastAPI except `handler`; the decision logic is plain Python.
