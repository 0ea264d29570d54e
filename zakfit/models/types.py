from datetime import datetime
from uuid import uuid4

from sqlalchemy.dialects.mysql import DATETIME

from zakfit.extensions import db

# MySQL DATETIME drops fractional seconds unless fsp is set; list ordering relies on them.
Timestamp = db.DateTime().with_variant(DATETIME(fsp=6), "mysql")


def uuid_pk():
    return db.Column(db.Uuid, primary_key=True, default=uuid4)


def created_at_column():
    return db.Column(Timestamp, nullable=False, default=datetime.utcnow)
