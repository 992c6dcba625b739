"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every entity package uses
(DB wiring, settings, errors, metrics). Keep entity-specific SQL in the
corresponding package (e.g. `daycares/repository.py`).
"""
