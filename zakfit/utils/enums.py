from enum import IntEnum

class HealthGoal(IntEnum):
    LOSS = 0
    GAIN = 1
    MAINTAIN = 2

class DietPreference(IntEnum):
    MEAT = 0
    FISH = 1
    ANIMAL_PRODUCTS = 2
    RAW_FOOD = 3
    LOCAL_PRODUCTS = 4
    GLUTEN = 5
