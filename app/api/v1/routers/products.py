# app/api/v1/routers/products.py

from fastapi import APIRouter, Depends
from typing import Annotated

from app.api.deps import catalog_service
from app.domain.models.product import ProductIn
from app.domain.services.catalog_svc import CatalogService

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])

CatalogDep = Annotated[CatalogService, Depends(catalog_service)]


@router.get("/products", summary="List all products (served from cache when warm)")
async def list_products(svc: CatalogDep):
    products = await svc.list_products()
    return [p.to_json_dict() for p in products]


@router.post("/products", status_code=201, summary="Create a product and invalidate the list cache")
async def add_product(payload: ProductIn, svc: CatalogDep):
    product = await svc.add_product(payload)
    return product.to_json_dict()
