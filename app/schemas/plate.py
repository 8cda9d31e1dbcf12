# app/schemas/plate.py
from pydantic import BaseModel, Field
from datetime import datetime
from enum import Enum
from typing import Any, List, Literal, Optional, Union

NOT_PAID = "NOT PAID"


class ResultStatus(str, Enum):
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class PlateRequest(BaseModel):
    plate: Any = None    # absent or non-string plates are classified by the validator, not rejected


class PlateRecordData(BaseModel):
    """A plate document as stored in, and read back from, a collection."""
    plate: str
    registration_timestamp: datetime = Field(alias="registrationTimestamp")

    class Config:
        populate_by_name = True


class DocIdPayload(BaseModel):
    doc_id: Optional[str] = Field(default=None, alias="docId")

    class Config:
        populate_by_name = True


class RegisterResult(BaseModel):
    status: ResultStatus
    message: str
    payload: DocIdPayload


class QueryResult(BaseModel):
    status: ResultStatus
    message: str
    payload: Union[DocIdPayload, Literal["NOT PAID"], List[PlateRecordData]]
