"""Board rendering and pointer handling."""
