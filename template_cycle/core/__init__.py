"""Core modules for template-cycle.

- cycle: the value-cycling cursor bound into template namespaces
- config: named cycle sets persisted as JSON
"""
