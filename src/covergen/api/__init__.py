"""Panel API: configuration, LLM providers, services and server."""
