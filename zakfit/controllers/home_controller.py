from flask import jsonify
from zakfit.extensions import db


def home_index():
    return jsonify({"message": "It works!"})


def health_check():
    db_status = "healthy"
    try:
        db.session.execute(db.text("SELECT 1"))
    except Exception as e:
        db.session.rollback()
        db_status = f"unhealthy: {str(e)}"

    return jsonify({"status": "online", "database": db_status})
