"""Generic async repository with pagination, search and filtered deletes."""

from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_portal.db.base import Base
from vendor_portal.domain.mixins import utcnow

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository.

    Subclasses set `model`, and `pk` when the primary key column is not `id`.
    `search_columns` lists the text columns matched by the `search` argument
    of :meth:`list` (case-insensitive substring, OR-ed together).
    """

    model: type[ModelT]
    pk: str = "id"
    search_columns: Sequence[str] = ()
    default_order: str = "created_at"

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @property
    def _pk_col(self):
        return getattr(self.model, self.pk)

    def _base_query(self):
        return select(self.model)

    def _apply_filters(self, q, filters: dict[str, Any] | None, search: str | None):
        if filters:
            for col_name, value in filters.items():
                if value is not None and hasattr(self.model, col_name):
                    q = q.where(getattr(self.model, col_name) == value)
        if search and self.search_columns:
            term = search.strip().lower()
            term = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            pattern = f"%{term}%"
            q = q.where(
                or_(
                    *(
                        func.lower(getattr(self.model, col)).like(pattern, escape="\\")
                        for col in self.search_columns
                    )
                )
            )
        return q

    def _order_column(self, name: str | None):
        """Resolve a sort key to a mapped column; unknown names use `default_order`."""
        columns = self.model.__table__.columns
        if not name or name not in columns:
            name = self.default_order
        return getattr(self.model, name) if name in columns else None

    def nulled_required(self, changes: dict[str, Any]) -> list[str]:
        """Names in `changes` set to None whose column is NOT NULL."""
        columns = self.model.__table__.columns
        return [
            name for name, value in changes.items()
            if value is None and name in columns and not columns[name].nullable
        ]

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        result = await self._session.execute(
            self._base_query().where(self._pk_col == entity_id)
        )
        return result.scalars().first()

    async def get_by(self, **criteria: Any) -> ModelT | None:
        q = self._base_query()
        for col_name, value in criteria.items():
            q = q.where(getattr(self.model, col_name) == value)
        return (await self._session.execute(q)).scalars().first()

    async def list(
        self,
        *,
        offset: int = 0,
        limit: int | None = 20,
        order_by: str | None = None,
        order: str = "desc",
        filters: dict[str, Any] | None = None,
        search: str | None = None,
    ) -> tuple[list[ModelT], int]:
        """Return (items, total_count) with pagination and optional filters."""
        q = self._apply_filters(self._base_query(), filters, search)

        count_q = select(func.count()).select_from(q.subquery())
        total = (await self._session.execute(count_q)).scalar_one()

        col = self._order_column(order_by)
        if col is not None:
            q = q.order_by(col.desc() if order == "desc" else col.asc())
        q = q.offset(offset)
        if limit is not None:
            q = q.limit(limit)

        items = (await self._session.execute(q)).scalars().all()
        return list(items), total

    async def all(self, **filters: Any) -> list[ModelT]:
        items, _ = await self.list(limit=None, filters=filters)
        return items

    async def count(self, **filters: Any) -> int:
        q = self._apply_filters(select(func.count()).select_from(self.model), filters, None)
        return (await self._session.execute(q)).scalar_one()

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate defaults
        await self._session.refresh(instance)
        return instance

    async def update(self, entity_id: str, **kwargs: Any) -> ModelT | None:
        kwargs.pop(self.pk, None)
        if "updated_at" not in kwargs and hasattr(self.model, "updated_at"):
            kwargs["updated_at"] = utcnow()

        await self._session.execute(
            update(self.model)
            .where(self._pk_col == entity_id)
            .values(**kwargs)
            .execution_options(synchronize_session=False)
        )
        await self._session.flush()
        instance = await self.get_by_id(entity_id)
        if instance is not None:
            await self._session.refresh(instance)
        return instance

    async def delete(self, entity_id: str) -> bool:
        result = await self._session.execute(
            delete(self.model)
            .where(self._pk_col == entity_id)
            .execution_options(synchronize_session=False)
        )
        await self._session.flush()
        return result.rowcount > 0

    async def delete_for_vendor(self, vendor_id: str) -> int:
        """Hard-delete every row owned by a vendor; returns the row count."""
        result = await self._session.execute(
            delete(self.model)
            .where(self.model.vendor_id == vendor_id)
            .execution_options(synchronize_session=False)
        )
        await self._session.flush()
        return result.rowcount
