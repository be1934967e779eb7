"""Infrastructure - logging setup."""
