from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from vahub.database import get_db
from vahub.services.listing_service import list_plans, search_talent

router = APIRouter(prefix="/api", tags=["talents"])


@router.get("/talents")
def list_talents(
    search: str | None = None,
    min_rate: float | None = Query(default=None, ge=0),
    max_rate: float | None = Query(default=None, ge=0),
    min_verification: int | None = Query(default=None, ge=0, le=100),
    skill: str | None = None,
    db: Session = Depends(get_db),
):
    """Active job seeker profiles with skills. Rate bounds are inclusive."""
    return search_talent(
        db,
        query=search,
        min_rate=min_rate,
        max_rate=max_rate,
        min_verification=min_verification,
        skill=skill,
    )


@router.get("/plans")
def get_plans(db: Session = Depends(get_db)):
    return list_plans(db)
