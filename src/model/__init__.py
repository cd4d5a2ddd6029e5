"""Model classes for mailman."""

from model.card_sequence import CardNode, CardSequence
from model.merge_template import MergeTemplate, empty_merge_data
from model.template_container import MergeTemplateContainer

__all__ = [
    "CardNode",
    "CardSequence",
    "MergeTemplate",
    "MergeTemplateContainer",
    "empty_merge_data",
]
