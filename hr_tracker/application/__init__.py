"""
Application Layer - Use Cases and Orchestration

Responsibility:
    Coordinates the flow of data between API and Domain layers.
    Handles background notification dispatch with Celery.

Contains:
    - Commands (CQRS write operations) and the status transition gate
    - Queries (CQRS read operations)
    - Application services (transition use case, notification dispatcher)
    - Ports (protocols implemented by Infrastructure)
    - Celery tasks

Does NOT contain:
    - Domain business rules (belongs to Domain layer)
    - HTTP handling (belongs to API layer)
    - Infrastructure details (belongs to Infrastructure layer)
"""
