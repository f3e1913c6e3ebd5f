from .config import ListConfig
from .controller import RowView, SelectableList
from .items import InvalidItemError, Item, ItemCatalog, Labeled, Primitive
from .router import KeyboardRouter
from .search import SearchFilter
from .state import ListState
from .version import __version__

__all__ = [
    "InvalidItemError",
    "Item",
    "ItemCatalog",
    "KeyboardRouter",
    "Labeled",
    "ListConfig",
    "ListState",
    "Primitive",
    "RowView",
    "SearchFilter",
    "SelectableList",
    "__version__",
]
