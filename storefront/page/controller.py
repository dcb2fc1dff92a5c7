from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from .state import Failed, Idle, Loaded, Loading, PageState
from ..data.interface import ProductSource
from ..data.models import Product
from ..logging import get_logger

UNKNOWN_ERROR = "Unknown error"

Listener = Callable[[PageState], None]


def describe_error(err: object) -> str:
    """Turn a captured failure into the message shown to the user."""
    if isinstance(err, Exception):
        message = str(err).strip()
        if message:
            return message
    return UNKNOWN_ERROR


class PageController:
    """Drives the product page through Idle -> Loading -> Loaded | Failed.

    Each mount is tagged with a generation token. Results that settle for a
    token other than the current one (the page was unmounted or remounted in
    the meantime) are dropped.
    """

    def __init__(self, source: ProductSource) -> None:
        self.source = source
        self.logger = get_logger(__name__)
        self._state: PageState = Idle()
        self._generation = 0
        self._fetched: Optional[int] = None
        self._listeners: List[Listener] = []

    # ---------- observable state ----------

    @property
    def state(self) -> PageState:
        return self._state

    @property
    def products(self) -> Tuple[Product, ...]:
        if isinstance(self._state, Loaded):
            return self._state.products
        return ()

    @property
    def loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def error(self) -> Optional[str]:
        if isinstance(self._state, Failed):
            return self._state.message
        return None

    @property
    def mounted(self) -> bool:
        return not isinstance(self._state, Idle)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for state changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---------- lifecycle ----------

    def mount(self) -> int:
        if self.mounted:
            raise RuntimeError("PageController is already mounted")
        self._generation += 1
        self.logger.debug(f"Mounted product page (generation {self._generation})")
        self._set_state(Loading())
        return self._generation

    def unmount(self) -> None:
        self._generation += 1
        self._fetched = None
        self._set_state(Idle())

    def load(self, token: int) -> PageState:
        """Fetch the product list for mount ``token`` and settle the page."""
        if token != self._generation or self._fetched == token:
            return self._state
        self._fetched = token

        outcome: PageState = Failed(UNKNOWN_ERROR)
        try:
            outcome = Loaded(tuple(self.source.list_products()))
        except Exception as e:
            self.logger.warning(f"Loading products failed: {e!r}")
            outcome = Failed(describe_error(e))
        finally:
            self._settle(token, outcome)
        return self._state

    # ---------- internals ----------

    def _settle(self, token: int, outcome: PageState) -> None:
        if token != self._generation:
            self.logger.info(f"Discarding result for stale generation {token}")
            return
        if isinstance(outcome, Loaded):
            self.logger.info(f"Loaded {len(outcome.products)} products")
        self._set_state(outcome)

    def _set_state(self, state: PageState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
