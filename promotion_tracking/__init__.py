"""
Promotion Tracking API: CRUD service for promotion records.

Application package root, laid out as ports & adapters:

Layers:
    - domain: Promotion entity, patch value object, error taxonomy, repository port.
    - application: PromotionService and its DTOs.
    - infrastructure: SQLAlchemy engine lifecycle and the repository adapter.
    - interfaces: FastAPI routers and Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
