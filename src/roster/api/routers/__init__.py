"""API routers — one per entity plus health probes."""
