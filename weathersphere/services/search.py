"""Search controller owning the lookup view state."""

import logging
from collections.abc import Callable
from typing import Protocol

from ..exceptions import LOOKUP_FAILED_MESSAGE, LookupFailed
from ..models.view_state import ViewState
from ..models.weather import CurrentConditions

logger = logging.getLogger(__name__)

StateListener = Callable[[ViewState], None]


class ConditionsFetcher(Protocol):
    async def fetch_current(self, city: str) -> CurrentConditions: ...


class WeatherSearch:
    """Runs lookups and moves the view state through its transitions.

    Overlapping searches are neither serialized nor cancelled: each one
    applies its own outcome when it resolves, so the last to resolve wins.
    """

    def __init__(self, service: ConditionsFetcher) -> None:
        self._service = service
        self._state = ViewState()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    def subscribe(self, listener: StateListener) -> None:
        """Register a callback invoked after every state transition."""
        self._listeners.append(listener)

    def _transition(self, state: ViewState) -> None:
        self._state = state
        for listener in self._listeners:
            listener(state)

    async def search(self, city: str) -> ViewState:
        """Look up a city and return the resulting state.

        Blank input is ignored: no request is made and the state is unchanged.
        Any other search ends in success or failure, whatever the fetch raises.
        """
        query = city.strip()
        if not query:
            logger.debug("Ignoring empty search")
            return self._state

        logger.info(f"Searching weather for {query!r}")
        self._transition(self._state.begin_search())

        try:
            conditions = await self._service.fetch_current(query)
        except LookupFailed as e:
            self._transition(self._state.fail(e.message))
        except Exception:
            logger.exception(f"Unexpected error looking up {query[:80]!r}")
            self._transition(self._state.fail(LOOKUP_FAILED_MESSAGE))
        else:
            self._transition(self._state.succeed(conditions))

        return self._state
