"""
Core domain logic: chunking, similarity ranking and the exception hierarchy.
"""
