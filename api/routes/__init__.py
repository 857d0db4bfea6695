"""API route modules."""
from api.routes import auth, submissions, tests

__all__ = ["auth", "submissions", "tests"]
