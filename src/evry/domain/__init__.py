"""Domain layer — duration grammar, unit lexicon, and the run decision.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
