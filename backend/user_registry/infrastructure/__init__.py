"""Infrastructure Layer — database session management, logging, repositories."""
