"""
Repository Interfaces (Ports) for the training analytics engine.

This package defines abstract interfaces that decouple the analytics from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the analytics need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import SessionRepository, SetRepository

    class TrainingAnalyticsService:
        def __init__(self, session_repo: SessionRepository, set_repo: SetRepository):
            self._session_repo = session_repo
            self._set_repo = set_repo
"""

from application.ports.session_repository import SessionRepository
from application.ports.set_repository import SetRepository

__all__ = [
    "SessionRepository",
    "SetRepository",
]
