"""Storefront core: accounts, products, images and email verification."""

__version__ = "0.1.0"
