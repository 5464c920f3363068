"""
Example client for the Crime Data Proxy API.

Demonstrates how to consume the API from a dashboard or script.
"""

import requests
from typing import Dict, List, Optional


class CrimeApiClient:
    """
    Client for the Crime Data Proxy API.

    Usage:
        client = CrimeApiClient("http://localhost:3000")
        events = client.search("malmo")
        latest = client.latest("malmo")
    """

    def __init__(self, api_url: str = "http://localhost:3000"):
        """
        Initialize API client.

        Args:
            api_url: Base URL of the API server
        """
        self.api_url = api_url.rstrip('/')
        self.session = requests.Session()

    def _get(self, endpoint: str, params: Dict = None):
        """Make GET request to API."""
        url = f"{self.api_url}{endpoint}"
        response = self.session.get(url, params=params)
        response.raise_for_status()
        return response.json()

    def get_crimes(self) -> List[Dict]:
        """Recent crimes from the default location."""
        return self._get("/crime")

    def get_headlines(self) -> List[str]:
        """Headlines of recent crimes from the default location."""
        return self._get("/crimes/locations")

    def search(self, city: str) -> List[Dict]:
        """Recent crimes for a city."""
        return self._get("/crimes/search", params={"city": city})

    def latest(self, city: str) -> Optional[Dict]:
        """Most recent crime for a city, or None if there is none."""
        return self._get("/crimes/latest", params={"city": city})


if __name__ == "__main__":
    client = CrimeApiClient()

    print("Headlines (Helsingborg):")
    for headline in client.get_headlines():
        print(f"  - {headline}")

    latest = client.latest("malmo")
    if latest:
        print(f"\nLatest in Malmo: {latest.get('title')} ({latest.get('published')})")
