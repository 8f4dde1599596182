# nodekit/core/signal.py

from typing import Callable, List
from nodekit.core.logging import get_logger

logger = get_logger()


class Connection:
    """A single subscription to a Signal."""

    def __init__(self, signal: 'Signal', callback: Callable, one_shot: bool = False):
        self.signal = signal
        self.callback = callback
        self.one_shot = one_shot
        self.connected = True

    def disconnect(self):
        """Remove this subscription from its signal."""
        self.signal.disconnect(self)


class Signal:
    """
    Synchronous notification channel.
    Callbacks run on the emitting thread, in connection order.
    One-shot connections are removed before their callback runs, so they fire at most once.
    """

    def __init__(self, name: str = "signal"):
        self.name = name
        self._connections: List[Connection] = []

    def connect(self, callback: Callable, one_shot: bool = False) -> Connection:
        """Subscribe a callback. Returns the connection handle."""
        connection = Connection(self, callback, one_shot)
        self._connections.append(connection)
        return connection

    def disconnect(self, connection: Connection):
        """Unsubscribe a connection. Unknown connections are ignored."""
        if connection in self._connections:
            self._connections.remove(connection)
        connection.connected = False

    def disconnect_all(self):
        """Drop every subscription."""
        for connection in self._connections:
            connection.connected = False
        self._connections.clear()

    def emit(self, *args):
        """Invoke all connected callbacks."""
        for connection in self._connections.copy():
            if not connection.connected:
                continue

            if connection.one_shot:
                self.disconnect(connection)

            try:
                connection.callback(*args)
            except Exception as e:
                logger.exception(f"Error in '{self.name}' callback: {e}")

    def get_connection_count(self) -> int:
        return len(self._connections)
