from app.core.exceptions import NotFound, ValidationFailed
from app.crud.store import EntityStore
from app.schemas.food import FoodCreate, FoodUpdate
from app.services.pagination import list_page
from app.utils.money import to_fixed


async def _ensure_menu(store: EntityStore, menu_id: str):
    try:
        await store.find_one("menus", menu_id)
    except NotFound:
        raise ValidationFailed("menu not found")


async def create_food(store: EntityStore, food: FoodCreate):
    """Create a food under an existing menu, price rounded to 2dp"""
    await _ensure_menu(store, food.menu_id)

    return await store.insert("foods", {
        "name": food.name,
        "price": to_fixed(food.price, 2),
        "food_image": food.food_image,
        "menu_id": food.menu_id,
    })


async def update_food(store: EntityStore, food_id: str, updates: FoodUpdate):
    update_data = updates.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        raise ValidationFailed("no fields to update")

    if "price" in update_data:
        update_data["price"] = to_fixed(update_data["price"], 2)

    if "menu_id" in update_data:
        await _ensure_menu(store, update_data["menu_id"])

    return await store.update_fields("foods", food_id, update_data)


async def get_food(store: EntityStore, food_id: str):
    return await store.find_one("foods", food_id)


async def list_foods(store: EntityStore, page_size: int, page_number: int):
    return await list_page(store, "foods", page_size, page_number)
