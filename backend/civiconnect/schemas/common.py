"""Write acknowledgements returned by create and update endpoints."""
from pydantic import BaseModel


class InsertResult(BaseModel):
    acknowledged: bool = True
    insertedId: str


class UpdateResult(BaseModel):
    acknowledged: bool = True
    matchedCount: int
    modifiedCount: int
