"""Models for generated menus and grocery lists."""

from pydantic import BaseModel, ConfigDict, Field, RootModel


class FoodItemWithQuantity(BaseModel):
    """Single food item with a free-text amount."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    food: str = Field(min_length=1, description="food item")
    quantity: str = Field(min_length=1, description="quantity in grams")


class Menu(BaseModel):
    """Daily menu split into six meal slots."""

    breakfast: list[FoodItemWithQuantity] = Field(description="Breakfast")
    morning_snack: list[FoodItemWithQuantity] = Field(description="Morning snack")
    lunch: list[FoodItemWithQuantity] = Field(description="Lunch")
    afternoon_snack: list[FoodItemWithQuantity] = Field(
        description="Afternoon snack"
    )
    dinner: list[FoodItemWithQuantity] = Field(description="Dinner")
    evening_snack: list[FoodItemWithQuantity] = Field(description="Evening snack")


MEAL_SLOTS: tuple[str, ...] = tuple(Menu.model_fields)


class GroceryList(RootModel[list[FoodItemWithQuantity]]):
    """Grocery list implied by a menu."""


class Result(BaseModel):
    """Final output of a planning run."""

    menu: Menu
    grocery_list: GroceryList
