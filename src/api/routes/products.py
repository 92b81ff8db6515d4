"""Product catalogue routes.

Endpoints:
- GET /api/product/all: List all products
- GET /api/product/{id}: Get one product
- POST /api/product/create: Create a product
- DELETE /api/product/delete/{id}: Delete a product
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_product_repo
from api.models import DeleteProductResponse, ProductRequest, ProductResponse
from domain.model.errors import InternalError, NotFoundError, ValidationError
from domain.model.product import Category
from port.product_repository import ProductRepository
from services import product_service

router = APIRouter(prefix="/api/product", tags=["products"])


@router.get("/all", response_model=list[ProductResponse])
async def list_products(repo: ProductRepository = Depends(get_product_repo)):
    try:
        products = product_service.list_products(repo)
    except InternalError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return [ProductResponse.from_domain(p) for p in products]


@router.post("/create", response_model=ProductResponse)
async def create_product(
    request: ProductRequest,
    repo: ProductRepository = Depends(get_product_repo),
):
    """Create a product. Responds 200 with the stored product."""
    try:
        product = product_service.create_product(
            repo,
            title=request.title,
            price=request.price,
            description=request.description,
            category=Category(
                id=request.category.id,
                name=request.category.name,
                image=request.category.image,
            ),
            brand=request.brand,
            image_url=request.image_url,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InternalError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return ProductResponse.from_domain(product)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, repo: ProductRepository = Depends(get_product_repo)):
    try:
        product = product_service.get_product(repo, product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InternalError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return ProductResponse.from_domain(product)


@router.delete("/delete/{product_id}", response_model=DeleteProductResponse)
async def delete_product(product_id: str, repo: ProductRepository = Depends(get_product_repo)):
    try:
        product = product_service.delete_product(repo, product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InternalError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return DeleteProductResponse(
        message="Product deleted successfully",
        product=ProductResponse.from_domain(product),
    )
