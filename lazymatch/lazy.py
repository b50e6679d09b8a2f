import logging
from typing import Any, Callable, Iterable, List, NamedTuple, Tuple

from .models import MatchStats

logger = logging.getLogger(__name__)

# Marks "no arm matched"; actions are free to return None.
_MISS = object()


class Arm(NamedTuple):
    """A predicate/action pair. The first arm whose predicate accepts an item wins."""
    predicate: Callable[[Any], bool]
    action: Callable[[Any], Any]


def _require_callable(name, value):
    if not callable(value):
        raise TypeError(f"{name} must be callable, got {type(value).__name__}")


class Match:
    """
    A lazy, pull-based matcher over a source iterable. Items are tested
    against the registered arms in order and the first match's action
    produces the output. Items matching no arm are skipped.

    Every pull may consume several source items; call default() to get
    the one-item-per-output variant.
    """
    variant = "no_default"

    def __init__(self, source, arms=(), _iter=None):
        self._source = source
        self._iter = _iter if _iter is not None else iter(source)
        self._arms: Tuple[Arm, ...] = tuple(arms)
        self._init_counters()

    # --------- chainable builders ----------
    def arm(self, predicate: Callable[[Any], bool], action: Callable[[Any], Any]) -> "Match":
        _require_callable("predicate", predicate)
        _require_callable("action", action)
        nxt = self._with_arms(self._arms + (Arm(predicate, action),))
        logger.debug(f"Registered arm #{len(nxt._arms)} on {self.variant} matcher")
        return nxt

    def default(self, action: Callable[[], Any]) -> "MatchWithDefault":
        _require_callable("default", action)
        logger.debug(f"Attached default after {len(self._arms)} arm(s)")
        return MatchWithDefault(self._source, self._arms, action, _iter=self._iter)

    @property
    def arms(self) -> Tuple[Arm, ...]:
        return self._arms

    # --------- forcing evaluation ----------
    def to_list(self) -> List[Any]:
        return list(self)

    def first(self, default=None):
        """Pull once, returning default if nothing is left"""
        return next(self, default)

    def stats(self) -> MatchStats:
        return MatchStats(
            variant=self.variant,
            arms=len(self._arms),
            consumed=self._consumed,
            produced=self._produced,
            skipped=self._skipped,
            defaulted=self._defaulted,
            arm_hits=list(self._arm_hits),
            exhausted=self._exhausted,
        )

    # --------- iterator protocol ----------
    def __iter__(self):
        return self

    def __next__(self):
        return self._pull()

    def _pull(self):
        for item in self._iter:
            self._consumed += 1
            result = self._scan(item)
            if result is _MISS:
                result = self._on_miss()
                if result is _MISS:
                    continue
            self._produced += 1
            return result

        if not self._exhausted:
            self._exhausted = True
            logger.debug(
                f"Source exhausted after {self._consumed} item(s), "
                f"{self._produced} produced, {self._skipped} skipped"
            )
        raise StopIteration

    def _scan(self, item):
        for index, arm in enumerate(self._arms):
            if arm.predicate(item):
                self._arm_hits[index] += 1
                return arm.action(item)
        return _MISS

    def _on_miss(self):
        self._skipped += 1
        return _MISS

    # --------- helpers ----------
    def _with_arms(self, arms):
        return Match(self._source, arms, _iter=self._iter)

    def _init_counters(self):
        self._consumed = 0
        self._produced = 0
        self._skipped = 0
        self._defaulted = 0
        self._arm_hits = [0] * len(self._arms)
        self._exhausted = False

    def __repr__(self):
        return f"{type(self).__name__}(arms={len(self._arms)}, consumed={self._consumed})"


class MatchWithDefault(Match):
    """
    Matcher with a fallback: each pull consumes exactly one source item and
    always yields either the matching arm's result or default().
    """
    variant = "with_default"

    def __init__(self, source, arms, default_action, _iter=None):
        super().__init__(source, arms, _iter=_iter)
        self._default = default_action

    def default(self, action: Callable[[], Any]) -> "MatchWithDefault":
        """Replace the fallback; registered arms are kept"""
        _require_callable("default", action)
        logger.debug(f"Replaced default on matcher with {len(self._arms)} arm(s)")
        return MatchWithDefault(self._source, self._arms, action, _iter=self._iter)

    def _on_miss(self):
        self._defaulted += 1
        return self._default()

    def _with_arms(self, arms):
        return MatchWithDefault(self._source, arms, self._default, _iter=self._iter)


def match_on(source: Iterable[Any]) -> Match:
    """Wrap any iterable in a matcher with no arms and no default."""
    return Match(source)


class MatchExt:
    """Mixin adding .match_on() to an iterable class."""

    def match_on(self) -> Match:
        return match_on(self)
