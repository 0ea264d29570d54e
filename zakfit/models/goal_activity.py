from zakfit.extensions import db
from zakfit.models.types import created_at_column, uuid_pk


class GoalActivity(db.Model):
    """A standing activity target, e.g. three 45 minute cardio sessions a week."""

    __tablename__ = "goal_activities"

    id = uuid_pk()
    frequency = db.Column(db.Integer)
    calories_goal = db.Column(db.Float)
    duration_goal = db.Column(db.Float)
    user_id = db.Column(db.Uuid, db.ForeignKey("users.id"), nullable=False, index=True)
    type_activity_id = db.Column(db.Uuid, db.ForeignKey("type_activities.id"), nullable=False)
    created_at = created_at_column()

    user = db.relationship("User", back_populates="goal_activities")
    type_activity = db.relationship("TypeActivity")
