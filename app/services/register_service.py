# app/services/register_service.py
"""
registerPlate — validate a plate and store it as a new document.

How it works:
  - The record is built from the request plate + the current UTC time
  - Invalid / missing plate → ERROR result, nothing written
  - Valid plate → one insert, no duplicate check (a plate may be registered many times)
  - Store failure → ERROR result with the INFRA message
"""

from datetime import datetime
from app.schemas.plate import (
    DocIdPayload, PlateRecordData, PlateRequest, RegisterResult, ResultStatus,
)
from app.services.plate_store import PlateCollection, PlateStoreError
from app.services.plate_validator import ErrorCode, error_message, validate_plate
from app.utils.logger import get_logger

logger = get_logger(__name__)

REGISTER_OK_MESSAGE = "Record inserted successfully."


def _error_result(code: ErrorCode) -> RegisterResult:
    return RegisterResult(
        status=ResultStatus.ERROR,
        message=error_message(code),
        payload=DocIdPayload(doc_id=None),
    )


async def register_plate(request: PlateRequest, collection: PlateCollection) -> RegisterResult:
    code = validate_plate(request.plate)
    if code != ErrorCode.OK:
        logger.error(f"[registerPlate] Rejected plate={request.plate!r} code={int(code)}")
        return _error_result(code)

    record = PlateRecordData(plate=request.plate, registration_timestamp=datetime.utcnow())
    try:
        doc_id = collection.add(record)
    except PlateStoreError as e:
        logger.error(f"[registerPlate] Store failure for plate={record.plate}: {e}", exc_info=True)
        return _error_result(ErrorCode.INFRA)

    logger.info(f"[registerPlate] Plate={record.plate} stored as doc {doc_id}")
    return RegisterResult(
        status=ResultStatus.SUCCESS,
        message=REGISTER_OK_MESSAGE,
        payload=DocIdPayload(doc_id=doc_id),
    )
