"""Domain value objects."""

from storefront.domain.value_objects.email import Email

__all__ = ["Email"]
