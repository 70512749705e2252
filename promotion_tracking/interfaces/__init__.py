"""
Interfaces layer package.

FastAPI routers, Pydantic request/response schemas and dependency
wiring. Routes call the application service and return responses.
"""
