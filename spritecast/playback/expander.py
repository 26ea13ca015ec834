"""Script expansion: nested authored script -> flat run sequence.

Repeat blocks are unrolled by their count. Everything else passes through in
order, including actions with an unrecognised tag (they run as no-ops).
Malformed repeat blocks are a normal state while a user is still editing,
so they contribute nothing instead of raising.
"""

import logging

from spritecast.core.models import Action, Repeat, coerce_count

logger = logging.getLogger(__name__)


def expand_actions(actions: list[Action], repeat_fallback: bool = False) -> list[Action]:
    """
    Flatten a script into the sequence of steps that will actually run.

    Args:
        actions: Authored root script, possibly containing repeat blocks
        repeat_fallback: Legacy mode; an empty repeat block repeats the root
            action immediately before it instead of contributing nothing

    Returns:
        New list of primitive actions. The input is not modified.
    """
    sequence: list[Action] = []

    for index, action in enumerate(actions):
        if not isinstance(action, Repeat):
            sequence.append(action)
            continue

        times = coerce_count(action.times)
        body = _repeat_body(action)

        if not body and repeat_fallback and index > 0:
            previous = actions[index - 1]
            if not isinstance(previous, Repeat):
                body = [previous]

        if not body or times == 0:
            logger.debug("Repeat block at %d contributes nothing (times=%r)", index, action.times)
            continue

        for _ in range(times):
            sequence.extend(body)

    return sequence


def _repeat_body(repeat: Repeat) -> list[Action]:
    body = []
    for child in repeat.children:
        if not child.is_primitive:
            logger.debug("Dropping repeat block nested inside another repeat block")
            continue
        body.append(child)
    return body
