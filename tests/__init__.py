"""Test suite for the payment instructions service.

Test structure:
- unit/: Unit tests - parser, validator chain, scheduler, executor,
  assembler and handler in isolation (no HTTP)
- api/: API endpoint tests - FastAPI TestClient against the real app

Shared fixtures and builders live in conftest.py.
"""
