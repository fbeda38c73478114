"""What To Watch: movie catalog REST backend (FastAPI + async SQLAlchemy)."""

__version__ = "1.0.0"
