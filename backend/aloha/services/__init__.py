# Services package init
"""
Taste of Aloha Backend — Services Layer
========================================

Service Inventory:
    - mapping:       normalize_new_item / normalize_changes (pure payload mapping)
    - MenuStore:     abstract persistence interface (store_base)
    - SqlMenuStore:  MenuStore over an AsyncSession (sql_store)
    - InMemoryMenuStore: process-local MenuStore (memory_store)
    - MenuService:   resource handlers; menu_service and snack_service
"""
