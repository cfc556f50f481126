"""Version information for lint-grouped."""
__version__ = "0.1.0"
