"""
campfire_access.db

SQL backing for the entry list.

Responsibilities:
- Async engine construction.
- Declarative schema of the default entry-list table.
"""

# Package marker.
