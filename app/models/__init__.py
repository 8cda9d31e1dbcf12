# Plate Registry — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.plate_record import PlateRecord       # noqa
