"""
HTTP API package.

``router`` aggregates one sub‑router per resource; ``deps`` provides
the FastAPI dependencies that hand the application's store and
services to the handlers; ``errors`` installs the JSON error
handlers.
"""
