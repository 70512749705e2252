"""
Infrastructure layer package.

Concrete adapters for the ports defined in the domain layer,
plus the lifecycle of the shared database engine.
"""
