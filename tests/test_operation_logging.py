# tests/test_operation_logging.py
"""Each plate operation emits exactly one log record per call."""

import logging
import pytest
from unittest.mock import MagicMock
from app.schemas.plate import PlateRequest
from app.services.plate_store import PlateStoreError, SqlPlateCollection
from app.services.query_service import query_plate_status
from app.services.register_service import register_plate


def app_records(caplog):
    return [r for r in caplog.records if r.name.startswith("app.")]


class TestOperationLogging:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation", [register_plate, query_plate_status])
    @pytest.mark.parametrize("plate,code", [(None, 1), ("ABC", 2)])
    async def test_rejected_plate_logs_one_error_with_code(self, caplog, collection, operation, plate, code):
        caplog.set_level(logging.DEBUG)

        await operation(PlateRequest(plate=plate), collection)

        records = app_records(caplog)
        assert len(records) == 1
        assert records[0].levelno == logging.ERROR
        assert f"code={code}" in records[0].getMessage()

    @pytest.mark.asyncio
    async def test_successful_register_logs_once_through_sql_store(self, caplog, db):
        caplog.set_level(logging.DEBUG)

        await register_plate(PlateRequest(plate="ABC-1234"), SqlPlateCollection(db, "veiculos"))

        records = app_records(caplog)
        assert [(r.name, r.levelno) for r in records] == [
            ("app.services.register_service", logging.INFO),
        ]

    @pytest.mark.asyncio
    async def test_successful_query_logs_once_through_sql_store(self, caplog, db):
        coll = SqlPlateCollection(db, "veiculos")
        await register_plate(PlateRequest(plate="ABC-1234"), coll)
        caplog.clear()
        caplog.set_level(logging.DEBUG)

        await query_plate_status(PlateRequest(plate="ABC-1234"), coll)

        assert len(app_records(caplog)) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation,method", [
        (register_plate, "add"),
        (query_plate_status, "where_plate"),
    ])
    async def test_store_failure_logs_one_error(self, caplog, operation, method):
        caplog.set_level(logging.DEBUG)
        broken = MagicMock()
        getattr(broken, method).side_effect = PlateStoreError("connection refused")

        await operation(PlateRequest(plate="ABC-1234"), broken)

        records = app_records(caplog)
        assert len(records) == 1
        assert records[0].levelno == logging.ERROR
