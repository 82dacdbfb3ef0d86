"""Base repository with common CRUD operations."""

from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mission_control.db.models import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """Base repository with common CRUD operations."""

    def __init__(self, session: AsyncSession, model_class: type[T]):
        self.session = session
        self.model_class = model_class

    async def get_by_id(self, id: str) -> T | None:
        """Get entity by primary key."""
        return await self.session.get(self.model_class, id)

    async def list_all(self) -> list[T]:
        """List all entities."""
        result = await self.session.execute(select(self.model_class))
        return list(result.scalars().all())

    async def create(self, entity: T, *relations: str) -> T:
        """Create new entity, loading the named relationships afterwards."""
        self.session.add(entity)
        await self.session.flush()
        return await self.reload(entity, *relations)

    async def update(self, entity: T, *relations: str) -> T:
        """Flush pending changes on an entity and reload it."""
        await self.session.flush()
        return await self.reload(entity, *relations)

    async def delete(self, entity: T) -> None:
        """Delete entity."""
        await self.session.delete(entity)
        await self.session.flush()

    async def reload(self, entity: T, *relations: str) -> T:
        """Refresh column state, then eagerly load relationships.

        Relationships have to be loaded explicitly; lazy loads are not
        available on an async session.
        """
        await self.session.refresh(entity)
        if relations:
            await self.session.refresh(entity, list(relations))
        return entity
