from sqlalchemy import select, func
from app.models.catalog import Category, Product
from app.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    model = Category

    async def count_products(self, category_id: int) -> int:
        total = await self.session.scalar(
            select(func.count())
            .select_from(Product)
            .where(Product.category_id == category_id, Product.deleted_at.is_(None))
        )
        return total or 0


class ProductRepository(BaseRepository[Product]):
    model = Product
