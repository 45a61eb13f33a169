"""Supabase Storage provider"""

from providers.supabase.storage import SupabaseStorageClient, default_object_name

__all__ = ["SupabaseStorageClient", "default_object_name"]
