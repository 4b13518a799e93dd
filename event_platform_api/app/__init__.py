"""
Application package.

``main`` builds the FastAPI app.  Supporting code is split by concern:
``core`` (configuration, logging, storage, CORS, errors), ``models``
(stored records and the collection registry), ``schemas`` (request and
response bodies), ``services`` (domain logic) and ``api`` (routers).
"""

from .main import app  # noqa: F401
