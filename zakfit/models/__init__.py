from .user import User
from .type_activity import TypeActivity
from .physical_activity import PhysicalActivity
from .goal_activity import GoalActivity
from .food import Food
from .meal import Meal
from .composition import Composition

__all__ = [
    "User",
    "TypeActivity",
    "PhysicalActivity",
    "GoalActivity",
    "Food",
    "Meal",
    "Composition",
]
