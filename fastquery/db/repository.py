import logging
from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from fastquery.api.builder import BuiltQuery
from fastquery.api.filtering import FilterPredicate
from fastquery.api.pagination import QueryResult
from fastquery.api.sorting import SortSpec
from fastquery.db.compiler import compile_order_by, compile_predicate
from fastquery.errors.exceptions import AppError, DBError

ModelType = TypeVar("ModelType")


class QueryRepository(Generic[ModelType]):
    """
    Repository running list queries for a SQLAlchemy model.

    Both the page read and the count use the same compiled predicate, so
    the total always matches the filter the items were fetched with.
    """

    def __init__(
        self,
        model: Type[ModelType],
        session: AsyncSession,
        default_sort: Optional[SortSpec] = None,
    ) -> None:
        self.model = model
        self.session = session
        self.default_sort = default_sort
        self.logger = logging.getLogger(self.__class__.__name__)

    async def find(
        self,
        predicate: FilterPredicate,
        skip: int = 0,
        take: int = 10,
        order_by: Optional[SortSpec] = None,
    ) -> List[ModelType]:
        """Fetch one page of records matching the predicate."""
        return await self._find(
            self._where(predicate), skip, take, order_by or self.default_sort
        )

    async def count(self, predicate: FilterPredicate) -> int:
        """Count records matching the predicate, ignoring pagination."""
        return await self._count(self._where(predicate))

    async def list(self, query: BuiltQuery) -> QueryResult:
        """Run a built list query: one page read and one count read."""
        where = self._where(query.predicate)
        items = await self._find(where, query.skip, query.take, query.order_by)
        total = await self._count(where)
        self.logger.debug(
            f"Listed {len(items)} of {total} {self.model.__name__} records "
            f"(page={query.page}, limit={query.limit})"
        )
        return QueryResult(items=items, total=total)

    def _where(self, predicate: FilterPredicate) -> ColumnElement:
        return compile_predicate(predicate, self.model)

    async def _find(
        self,
        where: ColumnElement,
        skip: int,
        take: int,
        order_by: Optional[SortSpec],
    ) -> List[ModelType]:
        try:
            stmt = select(self.model).where(where)
            if order_by is not None:
                stmt = stmt.order_by(
                    *compile_order_by(order_by, self.model, self.default_sort, self.logger)
                )
            stmt = stmt.offset(skip).limit(take)
            result = await self.session.execute(stmt)
            items: Sequence[Any] = result.scalars().all()
            return list(items)
        except AppError:
            raise
        except Exception as e:
            self.logger.error(f"Error in find: {e}")
            raise DBError(message=str(e), details={"error": str(e)})

    async def _count(self, where: ColumnElement) -> int:
        try:
            stmt = select(func.count()).select_from(self.model).where(where)
            result = await self.session.execute(stmt)
            return int(result.scalar_one())
        except Exception as e:
            self.logger.error(f"Error in count: {e}")
            raise DBError(message=str(e), details={"error": str(e)})
