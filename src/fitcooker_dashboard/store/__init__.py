"""Data access for the dashboard: the store protocol and its Supabase implementation."""
