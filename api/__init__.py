# =============================================================================
# api/__init__.py
# =============================================================================
# Serverless adapters.  Each module exposes an ASGI `app` for hosts that
# route /api/<module> to a Python function.
# =============================================================================
