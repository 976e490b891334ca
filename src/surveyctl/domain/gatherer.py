"""Bounded gatherer — city filter with skip and limit over a record stream.

Per element, in traversal order:

1. City differs from the target: ignored (counts toward neither skip nor limit).
2. Fewer than ``skip_count`` matches skipped so far: skip it.
3. Fewer than ``limit`` collected: collect it.
4. Otherwise: stop.

INVARIANT: once ``limit`` records are collected, no further element is
pulled from the source. Over an infinite source that never yields
``skip_count + limit`` matches, gathering does not terminate.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from surveyctl.domain.records import Record


class GatherConfig(BaseModel):
    """Validated gather parameters. Invalid values fail on construction."""

    model_config = {"frozen": True}

    target_city: str
    skip_count: int = Field(default=0, ge=0)
    limit: int = Field(gt=0)


@dataclass
class GatherState:
    """Mutable state owned by exactly one gather call."""

    skipped: int = 0
    collected: list[Record] = field(default_factory=list)


def _admit(state: GatherState, record: Record, config: GatherConfig) -> bool:
    """Apply one element to *state*. Returns False when traversal must stop."""
    if record.city != config.target_city:
        return True
    if state.skipped < config.skip_count:
        state.skipped += 1
        return True
    if len(state.collected) < config.limit:
        state.collected.append(record)
        return True
    return False


def _is_full(state: GatherState, config: GatherConfig) -> bool:
    return len(state.collected) >= config.limit


def gather(records: Iterable[Record], config: GatherConfig) -> list[Record]:
    """Gather from a lazy (possibly infinite) source.

    Pulls one element at a time and stops pulling as soon as the limit
    is reached.
    """
    state = GatherState()
    for record in records:
        if not _admit(state, record, config) or _is_full(state, config):
            break
    return state.collected


def gather_list(records: Sequence[Record], config: GatherConfig) -> list[Record]:
    """Gather from an already materialized sequence.

    Same per-element decisions as :func:`gather`, so both return the
    same output for the same input order.
    """
    state = GatherState()
    for record in records:
        if not _admit(state, record, config):
            break
    return state.collected
