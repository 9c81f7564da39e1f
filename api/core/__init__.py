"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every resource uses (DB pool,
settings, logging, error mapping, the endpoint catalogue). Keep
resource-specific SQL and validation in the resource package
(e.g. `articles/`).
"""
