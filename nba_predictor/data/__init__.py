"""Data access: upstream clients, caching, retries and mock fallback."""
