"""
Pydantic schema definitions for API payloads.

Request and response bodies are declared here, separate from the
store, so the wire representation can evolve independently.
"""
