"""Application service: Add Product use case."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from plantngo.application.dto import ProductDTO, to_product_dto
from plantngo.domain.exceptions import AlreadyExistsError, EntityNotFoundError
from plantngo.domain.model.product import Product
from plantngo.domain.model.value_objects import Money
from plantngo.domain.repository.account_repository import MerchantRepository
from plantngo.domain.repository.file_storage import FileStorage
from plantngo.domain.repository.product_repository import ProductRepository
from plantngo.domain.service.carbon_footprint_service import CarbonFootprintService

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ImageUpload:
    """Input: raw image bytes to store alongside a product."""

    data: bytes
    filename: str
    content_type: str = "application/octet-stream"


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        merchant_repo: MerchantRepository,
        file_storage: FileStorage,
    ) -> None:
        self._product_repo = product_repo
        self._merchant_repo = merchant_repo
        self._file_storage = file_storage
        self._footprint = CarbonFootprintService(product_repo, merchant_repo)

    def handle(
        self,
        merchant_username: str,
        name: str,
        price: str,
        description: str,
        category: str,
        flavour_type: str | None = None,
        image: ImageUpload | None = None,
    ) -> ProductDTO:
        """Add a product to a merchant's catalog with no ingredients yet."""
        merchant = self._merchant_repo.get_by_username(merchant_username)
        if merchant is None:
            raise EntityNotFoundError("Merchant")

        product = Product.create(
            name=name,
            price=Money.of(price),
            description=description,
            merchant_username=merchant.username,
            category=category,
            flavour_type=flavour_type,
        )
        for existing in self._product_repo.list_by_merchant(merchant.username):
            if existing.name.lower() == product.name.lower():
                raise AlreadyExistsError("Product")

        if image is not None:
            product.image_url = self._file_storage.upload_file(
                image.data, image.filename, image.content_type
            )

        self._product_repo.save(product)
        # A new product starts at zero emission, which moves the mean.
        self._footprint.refresh_merchant_rating(merchant)

        logger.info("product_added", product_id=product.id, merchant=merchant.username)
        return to_product_dto(product)
