"""Movie prize-interval HTTP service."""
