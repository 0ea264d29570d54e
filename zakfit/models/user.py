from zakfit.extensions import db
from zakfit.models.types import created_at_column, uuid_pk


class User(db.Model):
    __tablename__ = "users"

    id = uuid_pk()
    name = db.Column(db.String(100), nullable=False)
    surname = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False, unique=True, index=True)
    password = db.Column(db.String(255), nullable=False)
    height = db.Column(db.Float)
    weight = db.Column(db.Float)
    # 0 = loss, 1 = gain, 2 = maintain (see HealthGoal)
    health_goal = db.Column(db.Integer)
    diet_preferences = db.Column(db.JSON)
    created_at = created_at_column()

    meals = db.relationship("Meal", back_populates="user", cascade="all, delete")
    physical_activities = db.relationship(
        "PhysicalActivity", back_populates="user", cascade="all, delete"
    )
    goal_activities = db.relationship(
        "GoalActivity", back_populates="user", cascade="all, delete"
    )
