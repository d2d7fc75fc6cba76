"""
Tarot Reader Backend — Application Package Initializer
======================================================

What: Marks the `app` directory as a Python package.
Why:  Enables module imports like `from app.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    This backend follows a small layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Frozen dataclass + Pydantic
    ├─────────────────────────────────────┤
    │        Store (In-Memory State)      │  ← dict guarded by a read/write lock
    └─────────────────────────────────────┘

    Routes handle HTTP details (status codes, headers) and talk to the store
    through an injected dependency. There is no persistence layer: the store
    lives exactly as long as the process.
"""

__version__ = "1.0.0"
