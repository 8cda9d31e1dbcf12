# app/models/plate_record.py
"""
Plate records table.
One row per stored plate document. Rows are written once by the register
operation and only ever read afterwards — there is no update or delete path.
The same plate may appear any number of times.
"""

import uuid

from sqlalchemy import Column, String, DateTime
from app.database import Base


def new_document_id() -> str:
    return uuid.uuid4().hex


class PlateRecord(Base):
    __tablename__ = "plate_records"

    id = Column(String(32), primary_key=True, default=new_document_id)
    collection = Column(String(100), nullable=False, index=True)
    plate = Column(String(50), nullable=False, index=True)
    registration_timestamp = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<PlateRecord {self.id} plate={self.plate} collection={self.collection}>"
