"""EcoSort Infrastructure Adapters."""
