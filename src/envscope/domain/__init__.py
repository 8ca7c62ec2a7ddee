"""Domain layer — key construction, parsing, and resolution records.

This layer depends only on stdlib and pydantic.
It must never import from resolver, config, commands, or output.
"""
