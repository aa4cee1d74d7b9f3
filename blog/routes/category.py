from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from blog.database import get_db
from blog.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from blog.services.category_service import CategoryService

router = APIRouter(prefix="/categories")


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(category: CategoryCreate, db: AsyncSession = Depends(get_db)):
    service = CategoryService(db)
    return await service.create(category)


@router.get("", response_model=list[CategoryResponse])
async def get_categories(db: AsyncSession = Depends(get_db)):
    service = CategoryService(db)
    return await service.list_categories()


@router.get("/{category_id:int}", response_model=CategoryResponse)
async def get_category(category_id: int, db: AsyncSession = Depends(get_db)):
    service = CategoryService(db)
    return await service.get(category_id)


@router.patch("/{category_id:int}", response_model=CategoryResponse)
async def update_category(category_id: int, data: CategoryUpdate, db: AsyncSession = Depends(get_db)):
    service = CategoryService(db)
    return await service.update(category_id, data)


@router.delete("/{category_id:int}", response_model=CategoryResponse)
async def delete_category(category_id: int, db: AsyncSession = Depends(get_db)):
    service = CategoryService(db)
    return await service.delete(category_id)
