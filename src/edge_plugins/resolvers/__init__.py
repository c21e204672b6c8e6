"""Per-extension display name and status resolution."""
