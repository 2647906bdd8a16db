# app/api/routers/weights.py
from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.clock import Clock, get_clock
from app.core.config import get_db
from app.core.security import get_current_user_id
from app.services.weight import WeightService
from app.schemas.common import SuccessResponse
from app.schemas.weight import WeightCreate, WeightOut, WeightRecordCreate, WeightUpdate


def get_weight_service(clock: Clock = Depends(get_clock)) -> WeightService:
    return WeightService(clock=clock)


router = APIRouter(prefix="/weights", tags=["Weight"])


@router.post(
    "",
    response_model=WeightOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create my weight goal",
)
def create_weight(
    weight_in: WeightCreate,
    user_id: UUID = Depends(get_current_user_id),
    service: WeightService = Depends(get_weight_service),
    db: Session = Depends(get_db),
):
    """Starting and target weight in kg or lb. Can only be created once per user."""
    return service.create_weight(db, user_id=user_id, weight_in=weight_in)


@router.get("/me", response_model=WeightOut, summary="Get my weight and history")
def get_my_weight(
    user_id: UUID = Depends(get_current_user_id),
    service: WeightService = Depends(get_weight_service),
    db: Session = Depends(get_db),
):
    return service.get_my_weight(db, user_id=user_id)


@router.put("/{weight_id}", response_model=WeightOut, summary="Update my weight goal")
def update_weight(
    weight_id: UUID,
    weight_in: WeightUpdate,
    user_id: UUID = Depends(get_current_user_id),
    service: WeightService = Depends(get_weight_service),
    db: Session = Depends(get_db),
):
    return service.update_weight(
        db, weight_id=weight_id, user_id=user_id, weight_in=weight_in
    )


@router.delete("/{weight_id}", response_model=SuccessResponse, summary="Delete my weight goal")
def delete_weight(
    weight_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    service: WeightService = Depends(get_weight_service),
    db: Session = Depends(get_db),
):
    service.delete_weight(db, weight_id=weight_id, user_id=user_id)
    return SuccessResponse(message="Weight deleted successfully")


@router.post(
    "/{weight_id}/records",
    response_model=WeightOut,
    summary="Log today's weigh-in",
)
def add_weight_record(
    weight_id: UUID,
    record_in: WeightRecordCreate,
    user_id: UUID = Depends(get_current_user_id),
    service: WeightService = Depends(get_weight_service),
    db: Session = Depends(get_db),
):
    """A second weigh-in on the same day in the same unit replaces the first."""
    return service.add_record(
        db, weight_id=weight_id, user_id=user_id, record_in=record_in
    )
