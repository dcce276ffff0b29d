"""Application service: Delete Product use case.

Deleting a product deletes its ingredient associations and re-derives
the merchant's carbon rating from the products left.
"""

from __future__ import annotations

import structlog

from plantngo.domain.exceptions import EntityNotFoundError
from plantngo.domain.repository.account_repository import MerchantRepository
from plantngo.domain.repository.product_repository import ProductRepository
from plantngo.domain.service.carbon_footprint_service import CarbonFootprintService

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        merchant_repo: MerchantRepository,
    ) -> None:
        self._product_repo = product_repo
        self._footprint = CarbonFootprintService(product_repo, merchant_repo)

    def handle(self, product_id: int) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product")
        merchant = self._footprint.merchant_of(product)

        self._product_repo.delete(product)
        self._footprint.refresh_merchant_rating(merchant)
        logger.info("product_deleted", product_id=product_id, merchant=merchant.username)
