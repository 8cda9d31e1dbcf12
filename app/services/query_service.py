# app/services/query_service.py
"""
queryPlateStatus — look up every stored document for a plate.

No matching document is reported as SUCCESS with the "NOT PAID" payload:
absence of a record is the unpaid signal, not an error.
"""

from app.schemas.plate import (
    NOT_PAID, DocIdPayload, PlateRequest, QueryResult, ResultStatus,
)
from app.services.plate_store import PlateCollection, PlateStoreError
from app.services.plate_validator import ErrorCode, error_message, validate_plate
from app.utils.logger import get_logger

logger = get_logger(__name__)

QUERY_OK_MESSAGE = "Plate queried successfully."


def _error_result(code: ErrorCode) -> QueryResult:
    return QueryResult(
        status=ResultStatus.ERROR,
        message=error_message(code),
        payload=DocIdPayload(doc_id=None),
    )


async def query_plate_status(request: PlateRequest, collection: PlateCollection) -> QueryResult:
    plate = request.plate
    code = validate_plate(plate)
    if code != ErrorCode.OK:
        logger.error(f"[queryPlateStatus] Rejected plate={plate!r} code={int(code)}")
        return _error_result(code)

    try:
        records = collection.where_plate(plate)
    except PlateStoreError as e:
        logger.error(f"[queryPlateStatus] Store failure for plate={plate}: {e}", exc_info=True)
        return _error_result(ErrorCode.INFRA)

    logger.info(f"[queryPlateStatus] Plate={plate} matched {len(records)} record(s)")
    if not records:
        return QueryResult(status=ResultStatus.SUCCESS, message=QUERY_OK_MESSAGE, payload=NOT_PAID)
    return QueryResult(status=ResultStatus.SUCCESS, message=QUERY_OK_MESSAGE, payload=records)
