"""Controller layer: card capabilities and the wizard that drives them.

This package contains:
- card: CardController / ToggleableCard capability base classes
- registry: CardRegistry name-keyed card lookup
- validators: predicates installed on cards
- wizard: WizardController traversal and template binding
"""

from controller.card import CardController, ToggleableCard
from controller.registry import CardRegistry
from controller.validators import validate_conditional, validate_not_empty
from controller.wizard import DOCUMENT_FLOW, REQUIRED_CARDS, WizardController

__all__ = [
    "CardController",
    "CardRegistry",
    "DOCUMENT_FLOW",
    "REQUIRED_CARDS",
    "ToggleableCard",
    "WizardController",
    "validate_conditional",
    "validate_not_empty",
]
