"""ClarityLens HTTP API."""
