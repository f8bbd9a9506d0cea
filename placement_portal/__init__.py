"""Campus placement portal: mock data store and HTTP API."""

__version__ = "1.0.0"
