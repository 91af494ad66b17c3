"""Domain layer — command grammar and the directory engine.

This layer depends only on the stdlib.
It must never import from services, config, commands, or output.
"""
