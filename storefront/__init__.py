"""
Storefront - pricing, cart and order domain core for the online shop.
"""

__version__ = "0.1.0"
