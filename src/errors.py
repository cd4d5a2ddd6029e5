"""Exceptions raised by mailman."""


class MailmanError(Exception):
    """Base exception for all mailman errors."""


class ContractError(MailmanError):
    """A required collaborator was not supplied at construction time."""


class TemplateStoreError(MailmanError):
    """Raised when the template store cannot be read."""
