# Routes package init
"""
Notes API — Routes Package
============================

Route Inventory:
    - greeting.py: ANY  /          (fixed greeting text)
    - notes.py:    POST /notes     (placeholder JSON)
    - health.py:   GET  /health    (liveness probe)

OPTIONS on any path is answered by CORSHeadersMiddleware before routing,
so no route registers it explicitly.
"""
