"""Auth commands."""

from apps.character.application.auth.commands.login import LoginCommand

__all__ = ["LoginCommand"]
