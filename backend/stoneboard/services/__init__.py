"""Services Layer — composes resolver, color strategy and post store.

Invariants:
    - Services hold no state between requests
    - Store and strategy are injected (no module-level singletons)
"""
