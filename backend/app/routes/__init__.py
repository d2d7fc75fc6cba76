# Routes package init
"""
Tarot Reader Backend — API Routes Package
=========================================

Route Inventory:
    - index.py:    GET  /                     (service description)
    - health.py:   GET  /health               (liveness check)
    - readings.py: GET  /api/readings         (list readings, newest first)
                   GET  /api/readings/{id}    (single reading)
                   POST /api/readings         (create reading)

Design Principle:
    Routes are THIN: take the request apart, call the store, shape the
    response with the right status code and headers.
"""
