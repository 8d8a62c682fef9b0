"""Auth app."""

