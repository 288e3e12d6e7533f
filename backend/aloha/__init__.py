"""
Taste of Aloha Backend — Application Package Initializer
=========================================================

What: Marks the `aloha` directory as a Python package.
Who:  Imported by uvicorn (`uvicorn aloha.main:app`), Alembic, the maintenance
      scripts and pytest.

Architecture Note:
    The backend keeps the usual layered split:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, headers
    ├─────────────────────────────────────┤
    │     Services (Resource handlers)    │  ← mapping, not-found vs failure
    ├─────────────────────────────────────┤
    │   Stores (SQL / in-memory)          │  ← create/read/update/delete
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Handlers receive the store they work on instead of reaching for a
    global, so every layer can be exercised in isolation.
"""

__version__ = "1.0.0"
