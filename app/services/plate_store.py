# app/services/plate_store.py
"""
Plate collections — the document-store side of the register and query operations.

A collection supports exactly two operations:
  - add(record)        → inserts one document, returns its generated id
  - where_plate(plate) → every document whose plate equals the input

SqlPlateCollection maps a named collection onto the plate_records table.
Any SQLAlchemy failure is rolled back and re-raised as PlateStoreError.
"""

from typing import List, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.plate_record import PlateRecord, new_document_id
from app.schemas.plate import PlateRecordData


class PlateStoreError(Exception):
    """The plate store could not complete a write or a query."""


class PlateCollection(Protocol):
    def add(self, record: PlateRecordData) -> str: ...

    def where_plate(self, plate: str) -> List[PlateRecordData]: ...


class SqlPlateCollection:
    def __init__(self, db: Session, name: str):
        self.db = db
        self.name = name

    def add(self, record: PlateRecordData) -> str:
        doc_id = new_document_id()
        row = PlateRecord(
            id=doc_id,
            collection=self.name,
            plate=record.plate,
            registration_timestamp=record.registration_timestamp,
        )
        try:
            self.db.add(row)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PlateStoreError(f"insert into '{self.name}' failed: {e}") from e
        return doc_id

    def where_plate(self, plate: str) -> List[PlateRecordData]:
        try:
            rows = (
                self.db.query(PlateRecord)
                .filter(PlateRecord.collection == self.name, PlateRecord.plate == plate)
                .all()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PlateStoreError(f"query on '{self.name}' failed: {e}") from e
        return [
            PlateRecordData(plate=row.plate, registration_timestamp=row.registration_timestamp)
            for row in rows
        ]
