"""Push notifications for extensions, built on pluggy.

INVARIANT: An extension that raises is reported as a warning; the push
outcome never changes because of it.
"""

from vaultpush.plugins.hookspecs import hookimpl
from vaultpush.plugins.manager import PushHooks

__all__ = ["PushHooks", "hookimpl"]
