"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from plantngo.application.add_product import ImageUpload
from plantngo.application.dto import ProductDTO, UpdateProductSpec, to_product_dto
from plantngo.domain.exceptions import EntityNotFoundError
from plantngo.domain.model.value_objects import Money
from plantngo.domain.repository.file_storage import FileStorage
from plantngo.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        file_storage: FileStorage,
    ) -> None:
        self._product_repo = product_repo
        self._file_storage = file_storage

    def handle(
        self,
        product_id: int,
        spec: UpdateProductSpec,
        image: ImageUpload | None = None,
    ) -> ProductDTO:
        """Update a product's descriptive fields.

        Carbon emission is not accepted here: it only changes through the
        ingredient composition use cases.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product")

        price = Money.of(spec.price) if spec.price is not None else None
        image_url = spec.image_url
        if image is not None:
            image_url = self._file_storage.upload_file(
                image.data, image.filename, image.content_type
            )

        product.update_details(
            name=spec.name,
            price=price,
            description=spec.description,
            image_url=image_url,
            flavour_type=spec.flavour_type,
        )
        self._product_repo.save(product)
        logger.info("product_updated", product_id=product.id)
        return to_product_dto(product)
