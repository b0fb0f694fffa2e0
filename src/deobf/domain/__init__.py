"""Domain layer — registry, builder, operation values and type ordering.

This layer depends only on the stdlib.
It must never import from plugins, infrastructure, services, commands, or config.
"""
