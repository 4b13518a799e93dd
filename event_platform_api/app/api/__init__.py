"""
HTTP routes.

``router.py`` exposes a top-level ``router`` that includes every
domain router from ``endpoints``.
"""
