"""Email drafting pipeline: search-grounded context enrichment and draft generation."""
