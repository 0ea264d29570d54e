from zakfit.extensions import db
from zakfit.models.types import created_at_column, uuid_pk


class Composition(db.Model):
    """Quantity of one food inside one meal."""

    __tablename__ = "compositions"

    id = uuid_pk()
    quantity = db.Column(db.Float, nullable=False)
    food_id = db.Column(db.Uuid, db.ForeignKey("foods.id"), nullable=False, index=True)
    meal_id = db.Column(db.Uuid, db.ForeignKey("meals.id"), nullable=False, index=True)
    created_at = created_at_column()

    food = db.relationship("Food", back_populates="compositions")
    meal = db.relationship("Meal", back_populates="compositions")
