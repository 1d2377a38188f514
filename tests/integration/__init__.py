"""Integration tests for the HTTP API."""
