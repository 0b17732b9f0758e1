"""Domain layer: pure parsing and conversion rules.

Domain modules never import from services, infrastructure, commands,
or output.
"""
