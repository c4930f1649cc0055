"""Static sample data served in mock mode."""
