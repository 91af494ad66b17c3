"""Configuration — settings discovery, models, and logging setup.

Only the CLI front-end reads configuration; the domain core takes none.
"""
