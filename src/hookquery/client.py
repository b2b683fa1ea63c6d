"""Entry point binding collection builders to a transport."""

from .abc import Transport
from .collection import Collection
from .logger import Logger


class Client:
    """Create `Collection` builders that share one transport.

    Example:
        >>> client = Client(transport)
        >>> client.collection("posts").where("active", True).get()
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport
        self.logger = Logger(self.__class__.__name__)
        self.logger.message("Client initialized: transport=%s", transport.__class__.__name__)

    @property
    def transport(self) -> Transport:
        return self._transport

    def collection(self, name: str) -> Collection:
        """Return a fresh builder for `name`.

        Raises:
            ConstructionError: If `name` is not a valid collection name
        """
        return Collection(self._transport, name)
