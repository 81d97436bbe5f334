"""
API Layer - FastAPI Presentation Layer

Responsibility:
    HTTP interface for the application. Handles requests, responses,
    and queues Celery tasks. No business logic.

Contains:
    - FastAPI routers (applications, notifications)
    - Request/Response models (Pydantic)
    - Dependency injection setup
    - Middleware configuration (CORS, logging)

Does NOT contain:
    - Business logic (belongs to Domain and Application layers)
    - Database operations (belongs to Infrastructure layer)
"""
