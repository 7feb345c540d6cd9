"""SQLAlchemy implementation of activity repository."""

from typing import Any, Optional
from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Activity
from domain.enums import ActivityType
from domain.value_objects import ActivityOption, ActivityQuery
from domain.repositories import IActivityRepository
from infrastructure.config import get_logger
from infrastructure.database.models import ActivityModel
from infrastructure.database.models.activity_model import utcnow


SORTABLE_COLUMNS = {
    "id": ActivityModel.id,
    "type": ActivityModel.type,
    "active": ActivityModel.active,
    "search": ActivityModel.search,
    "createdAt": ActivityModel.created_at,
    "created_at": ActivityModel.created_at,
    "updatedAt": ActivityModel.updated_at,
    "updated_at": ActivityModel.updated_at,
}


class SQLAlchemyActivityRepository(IActivityRepository):
    """
    Concrete implementation of IActivityRepository using SQLAlchemy.
    
    Every write is its own unit of work and is committed before the
    method returns.
    """
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
        self.logger = get_logger(self.__class__.__name__)
    
    async def create(self, activity: Activity) -> Activity:
        """Insert a new activity into the database."""
        model = self._entity_to_model(activity)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        await self.session.commit()
        return self._model_to_entity(model)
    
    async def count(self, query: ActivityQuery) -> int:
        """Count activities matching the query filter."""
        result = await self.session.execute(self.build_count_statement(query))
        return result.scalar_one()
    
    async def find(self, query: ActivityQuery) -> list[Activity]:
        """Retrieve one page of matching activities."""
        result = await self.session.execute(self.build_find_statement(query))
        return [self._model_to_entity(model) for model in result.scalars().all()]
    
    async def get_by_id(self, activity_id: str) -> Optional[Activity]:
        """Retrieve an activity by ID."""
        stmt = select(ActivityModel).where(ActivityModel.id == activity_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def update(self, activity_id: str, changes: dict[str, Any]) -> Optional[Activity]:
        """Apply a partial update and return the updated row, if any."""
        stmt = (
            update(ActivityModel)
            .where(ActivityModel.id == activity_id)
            .values(**self._changes_to_values(changes), updated_at=utcnow())
            .returning(ActivityModel)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        entity = self._model_to_entity(model)
        await self.session.commit()
        return entity
    
    async def delete(self, activity_id: str) -> bool:
        """Delete an activity."""
        stmt = delete(ActivityModel).where(ActivityModel.id == activity_id)
        result = await self.session.execute(stmt)
        deleted = result.rowcount > 0
        await self.session.commit()
        return deleted
    
    def build_count_statement(self, query: ActivityQuery) -> Select:
        """Build the SELECT count(*) statement for a listing query."""
        return (
            select(func.count())
            .select_from(ActivityModel)
            .where(*self._filters(query))
        )
    
    def build_find_statement(self, query: ActivityQuery) -> Select:
        """Build the sorted, paginated SELECT statement for a listing query."""
        stmt = select(ActivityModel).where(*self._filters(query))
        
        column = SORTABLE_COLUMNS.get(query.order_by)
        if column is None:
            self.logger.warning(f"Unknown sort field '{query.order_by}', leaving results unsorted")
        else:
            stmt = stmt.order_by(column.asc() if query.ascending else column.desc())
        
        return stmt.offset(query.skip).limit(query.limit)
    
    def _filters(self, query: ActivityQuery) -> list:
        """Translate the query's search/active filters into WHERE clauses."""
        filters = []
        if query.search:
            filters.append(ActivityModel.search.icontains(query.search, autoescape=True))
        if query.active is not None:
            filters.append(ActivityModel.active == query.active)
        return filters
    
    def _changes_to_values(self, changes: dict[str, Any]) -> dict[str, Any]:
        """Convert entity-level field values to column values."""
        values = dict(changes)
        if "type" in values:
            values["type"] = ActivityType(values["type"]).value
        if "options" in values:
            values["options"] = [option.to_document() for option in values["options"]]
        return values
    
    def _entity_to_model(self, entity: Activity) -> ActivityModel:
        """Convert domain entity to ORM model."""
        return ActivityModel(
            id=entity.id,
            type=entity.type.value,
            options=[option.to_document() for option in entity.options],
            active=entity.active,
            search=entity.search,
        )
    
    def _model_to_entity(self, model: ActivityModel) -> Activity:
        """Convert ORM model to domain entity."""
        return Activity(
            id=model.id,
            type=ActivityType(model.type),
            options=[ActivityOption.from_document(doc) for doc in (model.options or [])],
            active=model.active,
            search=model.search,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
