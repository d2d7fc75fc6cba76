# Middleware package init
"""
Tarot Reader Backend — Middleware Package
=========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [API Version] → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. API Version outermost: every response, including CORS preflight
       answers and 404/422 errors, gets X-API-Version
    2. Request ID: correlation ID for logging and tracing
    3. Logging: logs request details with the request ID
    4. CORS: Starlette's CORSMiddleware (handles preflight)
"""
