"""
Cross-cutting infrastructure: configuration, logging, storage, CORS
and error handling.
"""
