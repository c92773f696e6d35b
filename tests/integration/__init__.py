"""
Integration tests for the Mail Categorizer.

Exercise the full stack (FastAPI app, categorizer, dispatcher) with provider
HTTP traffic served by httpx.MockTransport, so no network access is needed.
"""
