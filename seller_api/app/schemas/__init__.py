"""
Pydantic schema definitions for API payloads.

Each domain (companies, services) defines its own request and response
models.  Schemas convert to and from the dataclasses in
``seller_api.app.models`` so that persistence stays decoupled from the
API representation.
"""
