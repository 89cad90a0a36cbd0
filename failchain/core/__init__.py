# failchain/core/__init__.py
"""
Core components: stack recording, error nodes, chain walking, format verbs.
"""
