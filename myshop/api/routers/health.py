from fastapi import APIRouter

from myshop.domain.schemas import HealthResponse
from myshop.utils.settings import SERVICE_NAME

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok", service=SERVICE_NAME)
