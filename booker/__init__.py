"""Async client for the Restful Booker API, built for API test automation."""

__version__ = "0.1.0"
