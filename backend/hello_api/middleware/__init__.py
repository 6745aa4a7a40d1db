# Middleware package init
"""
Hello API — Middleware Package
===============================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so the access log line carries the correlation ID;
    responses unwind in reverse order, which is where the logger measures
    status and duration.
"""
