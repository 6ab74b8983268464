"""Groupie Tracker: cache-fronted aggregation client for the Groupie Trackers API."""

__version__ = "0.1.0"
