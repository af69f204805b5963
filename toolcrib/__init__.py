"""Tool check-out/check-in tracking service."""
