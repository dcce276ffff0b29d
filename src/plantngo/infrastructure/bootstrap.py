"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Configuration comes from the environment:
  PLANTNGO_DATA_DIR   — where JSON files and uploads live
                        (default: ``<repo root>/data``)
  PLANTNGO_LOG_LEVEL  — structlog level filter (default: WARNING)
"""

from __future__ import annotations

import os
from pathlib import Path

from plantngo.infrastructure.persistence.json_account_repository import (
    JsonCustomerRepository,
    JsonMerchantRepository,
)
from plantngo.infrastructure.persistence.json_ingredient_repository import (
    JsonIngredientRepository,
)
from plantngo.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from plantngo.infrastructure.persistence.json_product_repository import (
    JsonProductIngredientRepository,
    JsonProductRepository,
)
from plantngo.infrastructure.persistence.json_promotion_repository import (
    JsonPromotionRepository,
)
from plantngo.infrastructure.persistence.json_quest_repository import (
    JsonQuestRepository,
)
from plantngo.infrastructure.storage.local_file_storage import LocalFileStorage

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    configured = os.environ.get("PLANTNGO_DATA_DIR")
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def log_level() -> str:
    return os.environ.get("PLANTNGO_LOG_LEVEL", "WARNING")


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def product_ingredient_repository() -> JsonProductIngredientRepository:
    return JsonProductIngredientRepository(data_dir() / "products.json")


def ingredient_repository() -> JsonIngredientRepository:
    return JsonIngredientRepository(data_dir() / "ingredients.json")


def merchant_repository() -> JsonMerchantRepository:
    return JsonMerchantRepository(data_dir() / "merchants.json")


def customer_repository() -> JsonCustomerRepository:
    return JsonCustomerRepository(data_dir() / "customers.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")


def quest_repository() -> JsonQuestRepository:
    return JsonQuestRepository(data_dir() / "quests.json")


def promotion_repository() -> JsonPromotionRepository:
    return JsonPromotionRepository(data_dir() / "promotions.json")


def file_storage() -> LocalFileStorage:
    return LocalFileStorage(data_dir() / "uploads")
