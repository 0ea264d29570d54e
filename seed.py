from zakfit import create_app
from zakfit.extensions import db
from zakfit.models.type_activity import TypeActivity

TYPE_ACTIVITIES = [
    "Cardio",
    "Strength training",
    "Yoga",
    "Running",
    "Cycling",
    "Swimming",
    "Walking",
]

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    for name in TYPE_ACTIVITIES:
        if not TypeActivity.query.filter_by(name=name).first():
            db.session.add(TypeActivity(name=name))
            print(f"Added: {name}")

    db.session.commit()
    print("Seed completed.")
