"""
Services module - Business Logic Layer.

Contains application services that orchestrate business logic,
sitting between the API layer (routes) and the data layer (repositories).

Services handle:
- Business rule validation
- Orchestrating repository operations
- Transaction boundaries

Usage:
    from services import ResumeService

    service = ResumeService(db_session)
    resume = await service.create(account_id, title, content)
"""

from services.auth_service import AuthenticationService
from services.resume_service import ResumeService

__all__ = [
    "AuthenticationService",
    "ResumeService",
]
