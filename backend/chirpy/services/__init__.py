"""Application services.

Subpackages import only from :mod:`chirpy.services._shared` and lower layers;
nothing is re-exported here so that storage code can import the shared error
types without pulling in every service.
"""
