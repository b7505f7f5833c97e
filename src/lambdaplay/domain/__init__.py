"""Domain layer: records, function types, and the collection operations.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
