from football_api.client.client import FootballApiClient

__all__ = ["FootballApiClient"]
