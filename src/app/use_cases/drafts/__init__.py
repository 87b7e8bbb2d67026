"""Draft use cases"""
from .save_draft import SaveDraft
from .get_draft import GetDraft
from .list_drafts import ListDrafts
from .delete_draft import DeleteDraft
from .finalize_draft import FinalizeDraft

__all__ = [
    "SaveDraft",
    "GetDraft",
    "ListDrafts",
    "DeleteDraft",
    "FinalizeDraft",
]
