"""
Server entry point for uvicorn.

Command: uvicorn app.server:app --host 0.0.0.0 --port 8001
"""
from dotenv import load_dotenv

# .env values must be in the environment before settings are built
load_dotenv()

from app.main import app  # noqa: E402

__all__ = ["app"]
