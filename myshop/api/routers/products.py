# myshop/api/routers/products.py
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from myshop.api.deps import get_service
from myshop.domain.schemas import Product
from myshop.services.product_service import (
    InvalidSortArgumentError,
    ProductNotFoundError,
    ProductService,
    UpsertOutcome,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.get(
    "",
    response_model=List[Product],
    summary="Fetches all products",
    description="Loads all data of all products",
)
def list_products(svc: ProductService = Depends(get_service)):
    return svc.list_products()


# stale sciezki musza byc przed /{product_id}, inaczej "sortBy" idzie jako id
@router.get("/getByStatus", response_model=List[Product])
def get_by_status(
    active: bool = Query(True),
    svc: ProductService = Depends(get_service),
):
    return svc.get_by_status(active)


@router.get("/getByPrice", response_model=List[Product])
def get_by_price(
    price_from: Decimal = Query(Decimal("0.5"), alias="from"),
    price_to: Decimal = Query(Decimal("1.9"), alias="to"),
    svc: ProductService = Depends(get_service),
):
    return svc.get_by_price(price_from, price_to)


@router.get("/sortBy", response_model=List[Product])
def sort_by(
    by: str = Query("id", description="id, name or price"),
    how: str = Query("asc", description="asc or desc"),
    svc: ProductService = Depends(get_service),
):
    try:
        return svc.sort_by(by, how)
    except InvalidSortArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get(
    "/{product_id}",
    response_model=Product,
    summary="Fetch a product by id",
    description="Loads a full product by its identifier",
    responses={404: {"description": "Invalid product id supplied"}},
)
def get_product(
    product_id: int = Path(..., description="Product identifier", examples=[2]),
    svc: ProductService = Depends(get_service),
):
    try:
        return svc.get_product(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=Product)
def create_product(payload: Product, svc: ProductService = Depends(get_service)):
    return svc.create_product(payload)


@router.put(
    "/{product_id}",
    response_model=Product,
    summary="Update or create a product",
    description="Updates a product by identifier or creates a new one",
    responses={
        200: {"description": "Product updated"},
        201: {"description": "Product created"},
    },
)
def upsert_product(
    payload: Product,
    response: Response,
    product_id: int = Path(..., description="Product id", examples=[2]),
    svc: ProductService = Depends(get_service),
):
    product, outcome = svc.upsert_product(product_id, payload)
    if outcome is UpsertOutcome.CREATED:
        response.status_code = status.HTTP_201_CREATED
    return product


@router.delete("/{product_id}", status_code=204, responses={404: {"description": "Product not found"}})
def delete_product(product_id: int, svc: ProductService = Depends(get_service)):
    try:
        svc.delete_product(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
