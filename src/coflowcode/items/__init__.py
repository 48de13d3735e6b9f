"""
Assignment items module.

The assignment document model: a tagged union of item variants and the
page layout derived from page breaks.
"""

from .models import (
    ITEM_TYPES,
    Assignment,
    AssignmentItem,
    CodeCellItem,
    CodeFile,
    EssayItem,
    FillInBlankItem,
    ItemType,
    MultipleChoiceItem,
    PageBreakItem,
    TextItem,
    create_default_item,
    item_from_dict,
)
from .pages import page_gate, split_pages

__all__ = [
    "ITEM_TYPES",
    "Assignment",
    "AssignmentItem",
    "CodeCellItem",
    "CodeFile",
    "EssayItem",
    "FillInBlankItem",
    "ItemType",
    "MultipleChoiceItem",
    "PageBreakItem",
    "TextItem",
    "create_default_item",
    "item_from_dict",
    "page_gate",
    "split_pages",
]
