"""registerPlate + queryPlateStatus — the two remote-callable plate operations"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.schemas.plate import PlateRequest, QueryResult, RegisterResult
from app.services.plate_store import SqlPlateCollection
from app.services.query_service import query_plate_status
from app.services.register_service import register_plate

router = APIRouter()


def get_plate_collection(db: Session = Depends(get_db)):
    """FastAPI dependency — the configured plate collection bound to this request's session."""
    return SqlPlateCollection(db, settings.PLATES_COLLECTION)


@router.post("/plates/register", response_model=RegisterResult, summary="registerPlate — store a plate record")
async def register(body: PlateRequest, collection=Depends(get_plate_collection)):
    """Validation failures come back as status=ERROR with HTTP 200."""
    return await register_plate(body, collection)


@router.post("/plates/status", response_model=QueryResult, summary="queryPlateStatus — payment status for a plate")
async def query_status(body: PlateRequest, collection=Depends(get_plate_collection)):
    return await query_plate_status(body, collection)
