"""
Infrastructure Layer for the training analytics engine.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseSessionRepository,
    SupabaseSetRepository,
    get_supabase_client,
    get_supabase_client_required,
)

__all__ = [
    "SupabaseSessionRepository",
    "SupabaseSetRepository",
    "get_supabase_client",
    "get_supabase_client_required",
]
