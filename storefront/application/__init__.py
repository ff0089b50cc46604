"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- services/: Verification lifecycle, notification dispatch, ownership guard

The application layer orchestrates domain logic; business rules live in the
domain entities and the services.
"""
