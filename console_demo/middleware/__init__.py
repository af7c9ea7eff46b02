"""
Console Demo API - Middleware Package
======================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Rate Limit] → [Logging] → [CORS] → Route Handler

    1. Request ID first so every later log line and error body can carry it
    2. Rate Limit rejects abusive clients before any handler work
    3. Logging records status and duration on the way back out
"""
