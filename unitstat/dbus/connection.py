import asyncio
import logging
from types import TracebackType
from typing import Self

from dbus_next.aio.message_bus import MessageBus
from dbus_next.constants import BusType
from dbus_next.errors import DBusError

from unitstat.dbus.constants import ConnectionConfig


class DBusConnectionManager:
    """Manages the D-Bus connection with retrying connects.

    Can be used as an async context manager, which connects on entry and
    disconnects on exit.
    """

    def __init__(
        self,
        bus_address: str | None = None,
        bus_type: BusType = BusType.SYSTEM,
        max_retries: int = ConnectionConfig.DEFAULT_MAX_RETRIES,
        initial_backoff: float = ConnectionConfig.DEFAULT_INITIAL_BACKOFF,
    ):
        """
        Initializes the DBusConnectionManager.

        Args:
            bus_address: Explicit bus address; overrides bus_type when set.
            bus_type: The D-Bus bus type to connect to.
            max_retries: The maximum number of connection retries.
            initial_backoff: The initial backoff delay in seconds for retries.
        """
        self._logger = logging.getLogger(__name__)

        self._bus_address = bus_address
        self._bus_type = bus_type
        self._bus: MessageBus | None = None
        self._max_retries = max_retries
        self._initial_backoff = initial_backoff
        self._connection_lock = asyncio.Lock()

    async def __aenter__(self) -> Self:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.disconnect()

    @property
    def is_connected(self) -> bool:
        return self._bus is not None and self._bus.connected

    async def connect(self) -> None:
        """Connects to the D-Bus with an exponential backoff retry mechanism.
        """
        async with self._connection_lock:
            if self.is_connected:
                self._logger.debug('Already connected to D-Bus.')
                return

            await self._attempt_connection_with_retry()

    async def _attempt_connection_with_retry(self) -> None:
        retries = 0
        backoff = self._initial_backoff

        while retries < self._max_retries:
            if await self._try_single_connection_attempt(retries + 1):
                return

            retries += 1
            if retries < self._max_retries:
                self._logger.info('Retrying in %.2f seconds.', backoff)
                await asyncio.sleep(backoff)
                backoff *= ConnectionConfig.BACKOFF_MULTIPLIER

        self._logger.critical(
            'Could not connect to D-Bus after %d attempts.',
            self._max_retries,
        )
        raise ConnectionError(
            f'Failed to connect to D-Bus after {self._max_retries} attempts.'
        )

    async def _try_single_connection_attempt(
        self,
        attempt_number: int,
    ) -> bool:
        """Try a single connection attempt.

        Args:
            attempt_number: The current attempt number for logging.

        Returns:
            True if connection was successful, False otherwise.
        """
        try:
            self._logger.info(
                'Attempting to connect to D-Bus (attempt %d/%d)...',
                attempt_number,
                self._max_retries,
            )
            self._bus = await MessageBus(
                bus_address=self._bus_address,
                bus_type=self._bus_type,
            ).connect()
            self._logger.info('Successfully connected to D-Bus.')
            return True
        except (DBusError, OSError) as e:
            self._logger.warning('Failed to connect to D-Bus: %s', e)
            return False

    async def disconnect(self) -> None:
        """Disconnects from the D-Bus if connected.
        """
        async with self._connection_lock:
            if self._bus:
                self._logger.info('Disconnecting from D-Bus.')
                self._bus.disconnect()
                self._bus = None

    async def get_bus(self) -> MessageBus:
        """Returns the MessageBus object, connecting first if needed.

        Raises:
            ConnectionError: If a connection cannot be established.
        """
        if not self.is_connected:
            self._logger.warning(
                'D-Bus connection is down. Attempting to reconnect.'
            )
            await self.connect()

        if not self._bus:
            raise ConnectionError('Failed to get a valid D-Bus connection.')

        return self._bus
