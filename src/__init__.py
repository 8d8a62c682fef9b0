"""Posts API."""

