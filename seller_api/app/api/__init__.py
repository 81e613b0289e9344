"""
API package containing versioned routes.

A version subpackage (``v1``) exposes a top‑level ``router`` which
includes all of its domain‑specific endpoints.  ``dependencies``
builds the services injected into handlers and ``errors`` maps service
errors to HTTP responses.
"""
