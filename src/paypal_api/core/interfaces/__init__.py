"""Contracts (Protocol) implemented by adapters.

The pipeline depends on these abstractions, never on a concrete HTTP library.
"""
