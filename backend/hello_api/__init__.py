"""
Hello API — Application Package Initializer
============================================

What: Marks the `hello_api` directory as a Python package.
Who:  Imported by uvicorn (`uvicorn hello_api.main:app`), pytest, and the demo client.

Architecture Note:
    The backend is a thin layered demo:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← turn HTTP requests into RequestContext
    ├─────────────────────────────────────┤
    │       Services (Method Dispatch)    │  ← one builder per HTTP method
    ├─────────────────────────────────────┤
    │         Schemas (Envelopes)         │  ← Pydantic response models
    └─────────────────────────────────────┘

    There is no persistence layer: every response is a pure function of the request.
"""

__version__ = "1.0.0"
