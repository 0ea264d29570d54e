from zakfit.extensions import db
from zakfit.models.types import created_at_column, uuid_pk


class TypeActivity(db.Model):
    __tablename__ = "type_activities"

    id = uuid_pk()
    name = db.Column(db.String(100), nullable=False, unique=True)
    created_at = created_at_column()
