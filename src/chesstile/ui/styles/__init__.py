"""Visual themes."""
