from .home_routes import home_bp
from .user_routes import user_bp
from .activity_routes import type_activity_bp, physical_activity_bp, goal_activity_bp
from .nutrition_routes import food_bp, meal_bp, composition_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(type_activity_bp)
    app.register_blueprint(physical_activity_bp)
    app.register_blueprint(goal_activity_bp)
    app.register_blueprint(food_bp)
    app.register_blueprint(meal_bp)
    app.register_blueprint(composition_bp)
