"""Domain models and value types.

Pure data structures (Pydantic v2 and dataclasses): no HTTP and no I/O, only
the shapes PayPal sends and expects and the rules they obey.
"""
