"""Core layer: configuration, errors, payload shapes and validation.

Nothing in here talks to the network; the only file access is the per-user `.env`
helpers in `config`.
"""
