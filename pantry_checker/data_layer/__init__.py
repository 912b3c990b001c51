"""Core value types and kitchen definition loading."""
