# =============================================================================
# api/mcp.py  —  Serverless Entry Point
# =============================================================================
#
# Serverless platforms that host Python ASGI functions import this module
# and look for a module-level `app`.  It is the same stateless HTTP app
# that `main.py --transport http` serves with uvicorn.
# =============================================================================

from dotenv import load_dotenv

# Load .env BEFORE importing the server: settings are read once, at import.
load_dotenv()

from tools.http_app import create_http_app  # noqa: E402

app = create_http_app()
