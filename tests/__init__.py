"""Test suite for Storefront.

Test structure follows the test pyramid:
- unit/: Unit tests - domain logic and handlers against in-memory fakes
- integration/: Integration tests - repositories and flows on a real SQLite database
"""
