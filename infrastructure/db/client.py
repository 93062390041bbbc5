"""
Supabase client construction.

Builds a client from Settings. Repositories receive the client by
injection; nothing else in the package creates one.
"""
from typing import Optional
import logging

from supabase import Client, create_client

from application.exceptions import RepositoryError
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def get_supabase_client(settings: Optional[Settings] = None) -> Optional[Client]:
    """
    Get Supabase client instance.

    Returns None if credentials are not configured.

    Args:
        settings: Settings to read credentials from (defaults to get_settings())

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = settings or get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        logger.warning("Supabase credentials not configured. Analytics reads are disabled.")
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required(settings: Optional[Settings] = None) -> Client:
    """
    Get Supabase client, raising if not configured.

    Raises:
        RepositoryError: If Supabase credentials are missing
    """
    client = get_supabase_client(settings)
    if client is None:
        raise RepositoryError("Supabase is not configured (SUPABASE_URL / key missing)")
    return client
