"""
Service layer abstraction.

Each service encapsulates the business rules for one concern.  Services
talk to ``core.storage`` only, so the JSON files could be swapped for
another store without changing API handlers.
"""
