"""Infrastructure layer — database, graph engine, store.

This layer depends on stdlib and third-party libs (SQLAlchemy, NetworkX)
plus the pure domain types. It must never import from services,
commands, or output.
"""
