# Schemas package init
"""
Hello API — Schemas Package
============================

    - hello.py: per-method response envelopes, ErrorResponse, HealthResponse
"""
