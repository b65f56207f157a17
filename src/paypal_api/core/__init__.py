"""Core layer.

Configuration, errors, domain types and the request pipeline. Depends on
abstractions (`core.interfaces`) only, never on a concrete HTTP client.
"""
