# myshop/domain/schemas.py
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Pozycja katalogu (request i response)."""

    id: int = Field(..., description="Product identifier", examples=[2])
    name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Exact decimal price, JSON string")
    is_active: bool = Field(False, alias="isActive", description="Product status")

    model_config = ConfigDict(populate_by_name=True)


class ErrorOut(BaseModel):
    description: str


class ResultOut(BaseModel):
    """Odpowiedz z danymi albo z opisem bledu, bez kodu 404."""

    result: List[Product] | None = None
    error: ErrorOut | None = None


class HealthResponse(BaseModel):
    status: str
    service: str
