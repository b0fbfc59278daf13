"""Search, filter and ranking services."""
