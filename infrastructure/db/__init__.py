"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into
TrainingAnalyticsService for clean separation of concerns and testability.

Usage:
    from infrastructure.db import (
        get_supabase_client_required,
        SupabaseSessionRepository,
        SupabaseSetRepository,
    )

    client = get_supabase_client_required()
    session_repo = SupabaseSessionRepository(client)
    set_repo = SupabaseSetRepository(client)
"""

from infrastructure.db.client import get_supabase_client, get_supabase_client_required
from infrastructure.db.session_repository import SupabaseSessionRepository
from infrastructure.db.set_repository import SupabaseSetRepository

__all__ = [
    # Client
    "get_supabase_client",
    "get_supabase_client_required",

    # Session reads
    "SupabaseSessionRepository",

    # Set reads
    "SupabaseSetRepository",
]
