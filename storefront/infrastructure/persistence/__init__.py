"""Database persistence (SQLAlchemy async)."""
