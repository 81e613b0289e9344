"""
Core infrastructure: settings, logging, database and request identity.
"""
