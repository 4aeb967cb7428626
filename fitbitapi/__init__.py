"""Client for the Fitbit Web API with typed sleep and activity responses and a per-date cache."""

__version__ = "0.1.0"

__all__ = ["activity_summary", "fitbit_client", "response_cache", "sleep"]