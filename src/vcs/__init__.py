"""Version-control tag lookup."""
