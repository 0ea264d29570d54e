from zakfit.extensions import db
from zakfit.models.types import created_at_column, uuid_pk


class Food(db.Model):
    __tablename__ = "foods"

    id = uuid_pk()
    name = db.Column(db.String(150), nullable=False)
    quantity = db.Column(db.Float, nullable=False)
    proteins = db.Column(db.Float, nullable=False)
    carbs = db.Column(db.Float, nullable=False)
    fats = db.Column(db.Float, nullable=False)
    calories = db.Column(db.Float, nullable=False)
    created_at = created_at_column()

    compositions = db.relationship("Composition", back_populates="food", cascade="all, delete")
