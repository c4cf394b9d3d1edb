"""
App assembly entry point.

Re-exports the FastAPI `app` from `medvault.api.main` so servers can be started
with `uvicorn app:app`.
"""

from medvault.api.main import app  # noqa: F401
