"""
Boundary layer: adapters for the record store and the embedding service.
"""
