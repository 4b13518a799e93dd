"""
Pydantic schema definitions for API payloads.

Request and response bodies are kept separate from the stored record
schemas in ``models`` so the wire format can differ from storage.
"""
