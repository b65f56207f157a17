"""Request pipeline services: token lifecycle, request building, error decoding."""
