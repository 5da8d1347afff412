"""
Service layer.

``WonderService`` encapsulates catalog logic on top of a
``WonderStore``; ``SeedService`` populates a store at startup.  API
handlers depend on services, never on the store directly.
"""
