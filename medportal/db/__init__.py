"""In-memory store bootstrap data."""
