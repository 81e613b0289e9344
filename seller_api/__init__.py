"""
Top‑level package for the Seller API.

This file makes ``seller_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``seller_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
