"""
E-commerce Infrastructure Layer

Adapters implementing the application ports.
"""
