# schemas/weight.py
from typing import List, Optional
from uuid import UUID
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.weight import WeightUnit


class WeightCreate(BaseModel):
    starting: float = Field(..., gt=0)
    target: float = Field(..., gt=0)
    unit: WeightUnit


class WeightUpdate(BaseModel):
    starting: Optional[float] = Field(None, gt=0)
    target: Optional[float] = Field(None, gt=0)
    unit: Optional[WeightUnit] = None


class WeightRecordCreate(BaseModel):
    value: float = Field(..., gt=0)
    unit: WeightUnit


class WeightRecordOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: date
    value: float
    unit: WeightUnit


class WeightOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    starting: float
    target: float
    unit: WeightUnit
    history: List[WeightRecordOut] = []
    created_at: datetime
    updated_at: datetime
