"""Pure transforms from raw store rows to recipe view models."""
