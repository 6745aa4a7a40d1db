# Services package init
"""
Hello API — Services Layer
===========================

Service Inventory:
    - HelloService: per-method response builders behind /api/hello

Services know nothing about Starlette requests; they take a RequestContext
and return a HandlerResult, so they can be tested without HTTP.
"""
