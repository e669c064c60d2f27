"""Interface-layer state machine around a single file classification.

A :class:`KakeiboSession` owns exactly one :class:`SessionState` at a time
and moves it through ``idle → loading → success | error``. A pass never stays
in ``loading``: every loader failure ends in an error state. Each transition
replaces the state object wholesale, so a state handed to a listener is never
mutated afterwards. Selecting a new file always discards the previous result.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from os import PathLike, fspath
from pathlib import Path
from typing import TypeAlias

from .api import categorize_csv_file
from .errors import CsvReadError, KakeiboError, UnsupportedFileTypeError
from .ingest.utils import is_csv_file
from .logging_setup import get_logger
from .models import Categories

_logger = get_logger("kakeibo.session")


class Status(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class SessionState:
    status: Status = Status.IDLE
    file: Path | None = None
    categories: Categories | None = None
    error: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.status is Status.LOADING


Loader: TypeAlias = Callable[..., Categories]
Listener: TypeAlias = Callable[[SessionState], None]


class KakeiboSession:
    """Drive one file at a time through loading and classification.

    Parameters
    ----------
    loader:
        Callable ``(path, *, content_type=None) -> Categories``. Defaults to
        :func:`kakeibo.api.categorize_csv_file`.
    on_change:
        Optional listener invoked with every new state, in transition order.
    """

    def __init__(
        self,
        *,
        loader: Loader = categorize_csv_file,
        on_change: Listener | None = None,
    ) -> None:
        self._loader = loader
        self._on_change = on_change
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    def _set(self, state: SessionState) -> SessionState:
        _logger.debug("session %s -> %s", self._state.status, state.status)
        self._state = state
        if self._on_change is not None:
            self._on_change(state)
        return state

    def select_file(
        self, path: str | PathLike[str], *, content_type: str | None = None
    ) -> SessionState:
        """Classify ``path`` and return the resulting success or error state."""

        p = Path(fspath(path))
        if not is_csv_file(p, content_type):
            message = UnsupportedFileTypeError(p.name).message
            return self._set(SessionState(status=Status.ERROR, error=message))

        self._set(SessionState(status=Status.LOADING, file=p))
        try:
            categories = self._loader(p, content_type=content_type)
        except KakeiboError as e:
            return self._set(SessionState(status=Status.ERROR, file=p, error=e.message))
        except Exception as e:
            # Any other failure still ends the pass as a read failure.
            _logger.warning("unexpected failure loading %s: %s", p, e)
            message = CsvReadError(str(e)).message
            return self._set(SessionState(status=Status.ERROR, file=p, error=message))
        return self._set(SessionState(status=Status.SUCCESS, file=p, categories=categories))

    def reset(self) -> SessionState:
        """Drop the current file, result and error."""

        return self._set(SessionState())


__all__ = ["Status", "SessionState", "KakeiboSession"]
