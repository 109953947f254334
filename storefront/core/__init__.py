"""
Core building blocks shared by every storefront domain.
"""
