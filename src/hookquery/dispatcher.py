"""Request dispatcher.

Maps terminal verbs onto the four transport calls and returns the transport's
future unmodified.
"""

from concurrent.futures import Future
from typing import Optional

from .abc import Transport
from .constants import Verb
from .logger import Logger
from .types import Payload

__all__ = ("RequestDispatcher",)


class RequestDispatcher:
    """Forward one request per terminal call to a `Transport`."""

    _VERB_MAP = {
        Verb.READ: "get",
        Verb.CREATE: "post",
        Verb.UPDATE: "put",
        Verb.DELETE: "remove",
    }

    def __init__(self, transport: Transport, logger: Optional[Logger] = None) -> None:
        self._transport = transport
        self.logger = logger or Logger(self.__class__.__name__)

    @property
    def transport(self) -> Transport:
        return self._transport

    def dispatch(self, verb: str, path: str, payload: Optional[Payload] = None) -> Future:
        """Issue exactly one transport call for `verb` on `path`.

        Args:
            verb: One of `Verb.READ`, `Verb.CREATE`, `Verb.UPDATE`, `Verb.DELETE`
            path: Request path, e.g. `collection/posts/7`
            payload: Wire query (read/delete) or request body (create/update)

        Raises:
            ValueError: If `verb` is unknown
        """
        try:
            method_name = self._VERB_MAP[verb]
        except KeyError:
            raise ValueError(f"Unknown verb: {verb!r}") from None
        self.logger.request(verb, path)
        return getattr(self._transport, method_name)(path, payload)
