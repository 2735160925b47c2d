"""
Core utilities shared across the Village Pay service.

Configuration (environment variables) and logging setup live here so that
routers/services never read os.environ or configure structlog themselves.
"""
