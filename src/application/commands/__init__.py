"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (SecureLogout).
"""

from src.application.commands.logout_commands import SecureLogout

__all__ = [
    "SecureLogout",
]
