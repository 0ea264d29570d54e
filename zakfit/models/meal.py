from zakfit.extensions import db
from zakfit.models.types import Timestamp, created_at_column, uuid_pk


class Meal(db.Model):
    __tablename__ = "meals"

    id = uuid_pk()
    name = db.Column(db.String(150), nullable=False)
    meal_type = db.Column(db.String(50), nullable=False)
    quantity = db.Column(db.Float, nullable=False)
    date = db.Column(Timestamp, nullable=False)
    calories = db.Column(db.Float, nullable=False)
    user_id = db.Column(db.Uuid, db.ForeignKey("users.id"), nullable=False, index=True)
    created_at = created_at_column()

    user = db.relationship("User", back_populates="meals")
    compositions = db.relationship("Composition", back_populates="meal", cascade="all, delete")
