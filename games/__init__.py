"""Game packages discovered by games.registry."""
