"""
Clients for other microservices of the marketplace.
"""
