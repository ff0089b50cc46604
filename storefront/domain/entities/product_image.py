"""ProductImage domain entity.

The core never inspects image bytes. It persists only the key returned by
the object storage collaborator.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class ProductImage:
    """Image attached to exactly one product for its lifetime.

    Attributes:
        id: Unique image identifier.
        product_id: Parent product id.
        storage_key: Unique handle into object storage.
        file_name: Original upload file name.
        content_type: MIME type supplied at upload.
        created_at: Upload timestamp.
    """

    id: UUID
    product_id: UUID
    storage_key: str
    file_name: str
    content_type: str
    created_at: datetime

    def belongs_to(self, product_id: UUID) -> bool:
        return self.product_id == product_id
