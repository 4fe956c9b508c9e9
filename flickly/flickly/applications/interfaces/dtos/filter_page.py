from pydantic import BaseModel, Field


class FilterPage(BaseModel):
    """Offset pagination for plain listings such as the user directory"""

    offset: int = Field(default=0, ge=0, description="Number of users to skip")
    limit: int = Field(default=50, ge=1, le=200, description="Maximum number of users to return")
