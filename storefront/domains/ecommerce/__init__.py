"""
E-commerce Domain

Bounded context for catalog pricing, cart calculation and order creation.
"""
