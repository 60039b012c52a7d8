"""Registry of payment processors indexed by id."""

import threading
from collections.abc import Iterable

from gateway.core.exceptions import RegistryLockedError
from gateway.core.logging import get_logger
from gateway.payments.providers import discover_processors
from gateway.payments.providers.base import PaymentProcessor

logger = get_logger(__name__)


class ProcessorRegistry:
    """Process-wide id -> processor mapping.

    Filled once by initialize() during application startup and read-only
    afterwards. Lookups take no lock.
    """

    def __init__(self) -> None:
        self._processors: dict[str, PaymentProcessor] = {}
        self._lock = threading.Lock()
        self._sealed = False

    @property
    def initialized(self) -> bool:
        return self._sealed

    def initialize(
        self,
        processors: Iterable[PaymentProcessor | None] | None = None,
        extra_paths: Iterable[str] = (),
    ) -> None:
        """Register discovered processors and seal the registry.

        Args:
            processors: Processors to register. Defaults to discover_processors()
            extra_paths: Extra 'module:Class' paths passed to discovery when
                processors is not given
        """
        if self._sealed:
            logger.warning("Processor registry already initialized, ignoring")
            return

        if processors is None:
            processors = discover_processors(extra_paths)

        for processor in processors:
            if processor is None:
                continue
            self.register(processor)

        self._sealed = True
        logger.info("Processor registry ready: %d processor(s)", len(self._processors))

    def register(self, processor: PaymentProcessor) -> bool:
        """Store processor under its id unless that id is taken.

        Returns:
            True if stored, False if the id was already registered

        Raises:
            RegistryLockedError: If called after initialize()
        """
        processor_id = processor.id()

        with self._lock:
            if self._sealed:
                raise RegistryLockedError(details={"processor_id": processor_id})

            if processor_id in self._processors:
                logger.debug(
                    "Duplicate payment processor ignored: %s (%s)",
                    processor_id,
                    processor.__class__.__name__,
                )
                return False

            self._processors[processor_id] = processor

        logger.info("Discovered payment processor: %s %s", processor_id, processor.get_name())
        return True

    def get_processor_by_id(self, processor_id: str) -> PaymentProcessor | None:
        return self._processors.get(processor_id)

    def all(self) -> list[PaymentProcessor]:
        """Snapshot of registered processors. Order is not guaranteed."""
        return list(self._processors.values())

    def __len__(self) -> int:
        return len(self._processors)

    def __contains__(self, processor_id: object) -> bool:
        return processor_id in self._processors
