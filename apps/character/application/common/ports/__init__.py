"""Common Ports."""

from apps.character.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]
