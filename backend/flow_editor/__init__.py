"""Agent flow editor backend: graph adapter, validation, and API client."""
