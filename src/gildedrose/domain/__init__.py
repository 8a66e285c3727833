"""Domain layer — items, aging rules, the rule registry, and the inventory.

This layer depends only on the stdlib.
It must never import from services, plugins, commands, output, or config.
"""
