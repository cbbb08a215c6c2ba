import logging
import threading
from typing import Callable

from pizza_builder.builders import Builder


logger = logging.getLogger(__name__)


class PerThreadBuilder:
    """Gives every calling thread its own builder, created by ``factory`` on first use.

    A single builder keeps one in-progress pizza, so threads sharing it would
    interleave their calls into the same pizza.
    """

    def __init__(self, factory: Callable[[], Builder]):
        self.factory = factory
        self._local = threading.local()

    def get(self) -> Builder:
        builder = getattr(self._local, "builder", None)
        if builder is None:
            builder = self.factory()
            self._local.builder = builder
            logger.debug("Created %s for thread %s", type(builder).__name__, threading.current_thread().name)
        return builder
