# Routes package init
"""
Taste of Aloha Backend — API Routes Package
============================================

Route Inventory:
    - items.py:   build_router(): CRUD route table for an item resource,
                  mounted at /api/menu and /api/snacks
    - health.py:  GET /health  (liveness)
                  GET /        (greeting)

Routes stay thin: they extract path params and bodies, call the service
and set status codes. Mapping and not-found handling live in services.
"""
