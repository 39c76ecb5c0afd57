import importlib

from app.models.drink import Drink
from app.models.inventory import Inventory
from app.models.inventory_history import InventoryHistory
from app.models.room import Room
from app.models.tip import Tip
from app.models.transaction import Transaction


def import_all_models() -> None:
    for module_name in (
        "app.models.drink",
        "app.models.inventory",
        "app.models.inventory_history",
        "app.models.room",
        "app.models.tip",
        "app.models.transaction",
    ):
        importlib.import_module(module_name)


__all__ = [
    "Drink",
    "Inventory",
    "InventoryHistory",
    "Room",
    "Tip",
    "Transaction",
    "import_all_models",
]
