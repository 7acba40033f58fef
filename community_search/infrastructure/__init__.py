"""Infrastructure: SQLAlchemy adapters for the application ports."""
