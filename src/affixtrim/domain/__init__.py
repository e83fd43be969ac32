"""Domain layer — sequence kinds and affix trimming.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
