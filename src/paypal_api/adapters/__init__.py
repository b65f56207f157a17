"""Concrete implementations: the httpx transport and the resource controllers."""
