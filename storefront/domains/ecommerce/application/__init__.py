"""
E-commerce Application Layer

Use cases, DTOs and ports for the e-commerce domain.
"""
