"""Test package for the ``mapscale`` helpers.

The suite uses ``unittest`` and runs with ``python -m unittest discover`` or
pytest from the repository root.
"""
