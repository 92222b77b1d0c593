"""Host dispatch interface and the bundled in-memory implementation.

* :class:`Dispatcher` -- what the loader forwards bindings to.
* :class:`HookTable` -- records registrations per hook without running them.
"""

from hookloader.dispatch.base import Dispatcher
from hookloader.dispatch.table import HookTable, Registration

__all__ = ["Dispatcher", "HookTable", "Registration"]
