"""
Pydantic schema definitions for API payloads.

Each entity defines a ``*Create`` model for request bodies of POST,
a ``*Update`` model whose fields are all optional for PUT, and a
``*Read`` model for responses.  Attributes are snake_case in Python
and camelCase on the wire (see ``base.CamelModel``).
"""
