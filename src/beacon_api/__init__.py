"""Beacon node validator query API."""
