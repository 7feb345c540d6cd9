"""Activity-related Pydantic schemas."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.enums import ActivityType
from domain.value_objects import ActivityOption


class CamelModel(BaseModel):
    """Base schema exposing camelCase field names on the wire."""
    
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ActivityOptionSchema(CamelModel):
    """Answer option (statement) of an activity."""
    
    text: str = Field("", description="Statement text", max_length=5000)
    is_correct: bool = Field(False, description="Whether this statement is a correct answer")
    
    def to_value_object(self) -> ActivityOption:
        return ActivityOption(text=self.text, is_correct=self.is_correct)


class ActivityCreateRequest(CamelModel):
    """Request schema for creating an activity."""
    
    type: ActivityType = Field(..., description="Activity type")
    options: list[ActivityOptionSchema] = Field(
        default_factory=list,
        description="Answer options; must be empty for essay activities"
    )
    active: bool = Field(True, description="Whether the activity is active")
    search: Optional[str] = Field(None, description="Text matched by the listing search filter")
    
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "type": "multipleChoice",
                    "options": [
                        {"text": "Paris is the capital of France", "isCorrect": True},
                        {"text": "Lyon is the capital of France", "isCorrect": False},
                    ],
                    "active": True,
                    "search": "capital france"
                }
            ]
        }
    )


class ActivityUpdateRequest(CamelModel):
    """Request schema for a partial activity update; omitted fields are kept."""
    
    type: Optional[ActivityType] = Field(None, description="Activity type")
    options: Optional[list[ActivityOptionSchema]] = Field(None, description="Answer options")
    active: Optional[bool] = Field(None, description="Whether the activity is active")
    search: Optional[str] = Field(None, description="Text matched by the listing search filter")
    
    def to_changes(self) -> dict:
        """Fields explicitly sent by the client, as domain values."""
        changes = {
            name: value
            for name, value in self.model_dump(exclude_unset=True, exclude={"options"}).items()
            # search is the only nullable column
            if value is not None or name == "search"
        }
        if self.options is not None:
            changes["options"] = [option.to_value_object() for option in self.options]
        return changes


class ActivityResponse(CamelModel):
    """Response schema for a stored activity."""
    
    id: str = Field(..., description="Activity identifier")
    type: ActivityType
    options: list[ActivityOptionSchema]
    active: bool
    search: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ActivityListResponse(CamelModel):
    """Response schema for one page of activities."""
    
    items: list[ActivityResponse]
    total: int = Field(..., description="Number of activities matching the filter")
    page: int
    page_size: int
    total_pages: int


class ErrorResponse(BaseModel):
    """Error body returned for handled failures."""
    
    statusCode: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="What went wrong")
    error: str = Field(..., description="HTTP reason phrase")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "statusCode": 404,
                    "message": "Activity not found.",
                    "error": "Not Found"
                }
            ]
        }
    }


class HealthResponse(BaseModel):
    """Health check response schema."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
