"""
Application package initializer.

The service manages companies on the marketplace and the services they
offer.  The code is split by layer: ``api`` holds the FastAPI routers,
``services`` the business workflows, ``repositories`` the SQLite
persistence, ``integrations`` the clients for other microservices and
``core`` the configuration, logging and database bootstrap.

The application object itself is built in ``main``; import it from
there (``seller_api.app.main:app``) so that importing a single
submodule, e.g. in tests, does not configure logging or open the
database.
"""
