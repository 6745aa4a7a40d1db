# Routes package init
"""
Hello API — Routes Package
===========================

Route Inventory:
    - hello.py:   GET/POST/PUT/DELETE/PATCH /api/hello   (method-dispatched echo)
    - health.py:  GET /health                            (service health check)
    - pages.py:   GET /                                  (browser demo page)

Routes stay thin: they translate HTTP into a RequestContext and back,
and leave per-method behaviour to services.hello_service.
"""
