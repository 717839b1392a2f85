"""
Feature modules for Journeyboard backend.

Each module is self-contained with its own:
- models.py: Pydantic models for data transfer
- repository.py: SQL for the module's tables
- service.py: Business logic implementation
- routes.py: FastAPI route handlers

Route handlers receive services through api.dependencies, never by
constructing them.
"""
