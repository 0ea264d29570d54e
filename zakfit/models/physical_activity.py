from zakfit.extensions import db
from zakfit.models.types import Timestamp, created_at_column, uuid_pk


class PhysicalActivity(db.Model):
    __tablename__ = "physical_activities"

    id = uuid_pk()
    duration = db.Column(db.Float, nullable=False)
    calories_burned = db.Column(db.Float)
    date = db.Column(Timestamp, nullable=False)
    user_id = db.Column(db.Uuid, db.ForeignKey("users.id"), nullable=False, index=True)
    type_activity_id = db.Column(db.Uuid, db.ForeignKey("type_activities.id"), nullable=False)
    created_at = created_at_column()

    user = db.relationship("User", back_populates="physical_activities")
    type_activity = db.relationship("TypeActivity")
