from pydantic import BaseModel, ConfigDict, Field


# ============ Role ============

class RoleRecord(BaseModel):
    id: int = Field(..., alias='Id')
    name: str = Field(..., alias='Name')
    parent: int = Field(..., alias='Parent')

    model_config = ConfigDict(populate_by_name=True, extra='ignore', from_attributes=True)


class RoleIndexEntryResponse(BaseModel):
    role: RoleRecord
    children: list[int] = []

    model_config = ConfigDict(from_attributes=True)


# ============ User ============

class UserRecord(BaseModel):
    id: int = Field(..., alias='Id')
    name: str = Field(..., alias='Name')
    role: int = Field(..., alias='Role')

    model_config = ConfigDict(populate_by_name=True, extra='ignore', from_attributes=True)


# ============ Schedule ============

class ScheduleRecord(BaseModel):
    id: int = Field(..., alias='Id')
    employee: int = Field(..., alias='Employee')
    start_time: int = Field(..., alias='StartTime')
    end_time: int = Field(..., alias='EndTime')

    model_config = ConfigDict(populate_by_name=True, extra='ignore', from_attributes=True)
