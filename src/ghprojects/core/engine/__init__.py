"""Bulk item-mutation engine."""

from ghprojects.core.engine.fields import FieldResolver, convert_field_value, match_option
from ghprojects.core.engine.items import ItemPipeline
from ghprojects.core.engine.pool import ADD_PHASE, AddItemsOrchestrator
from ghprojects.core.engine.progress import EditProgress, NullEditProgress
from ghprojects.core.engine.removal import REMOVE_PHASE, RemovalResolver

__all__ = [
    "ADD_PHASE",
    "REMOVE_PHASE",
    "AddItemsOrchestrator",
    "EditProgress",
    "FieldResolver",
    "ItemPipeline",
    "NullEditProgress",
    "RemovalResolver",
    "convert_field_value",
    "match_option",
]
