# myshop/api/deps.py
from fastapi import Depends, Request

from myshop.repos.product_repo import ProductRepo
from myshop.services.product_service import ProductService


def get_repo(request: Request) -> ProductRepo:
    return request.app.state.repo


def get_service(repo: ProductRepo = Depends(get_repo)) -> ProductService:
    return ProductService(repo)
