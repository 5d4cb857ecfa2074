"""Service layer — the read, decide, write sequence for a tag.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
