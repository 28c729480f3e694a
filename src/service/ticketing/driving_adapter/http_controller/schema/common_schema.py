from typing import Generic, Optional, TypeVar

from pydantic import BaseModel


DataT = TypeVar('DataT')


class SuccessResponse(BaseModel, Generic[DataT]):
    """Envelope for every successful response: `{message, data}`"""

    message: str
    data: Optional[DataT] = None


class HealthResponse(BaseModel):
    status: str
