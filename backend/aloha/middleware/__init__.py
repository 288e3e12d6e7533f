# Middleware package init
"""
Taste of Aloha Backend — Middleware Package
============================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first, so every later log line can carry it
    2. Logging wraps everything below it and sees the final status code
"""
