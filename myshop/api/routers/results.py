# myshop/api/routers/results.py
from fastapi import APIRouter, Depends

from myshop.api.deps import get_service
from myshop.domain.schemas import ResultOut
from myshop.services.product_service import ProductService

router = APIRouter(prefix="/p", tags=["results"])


@router.get(
    "/{product_id}",
    response_model=ResultOut,
    response_model_exclude_none=True,
    summary="Fetch a product by id as a result",
    description="Returns the product wrapped in a result, or an error description when it does not exist",
)
def get_result(product_id: int, svc: ProductService = Depends(get_service)):
    return svc.get_result(product_id)
