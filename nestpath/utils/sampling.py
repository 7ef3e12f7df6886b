"""
Random sampling and shuffling of container values.

Every call works with its own random.Random instance (passed in, or built
from `seed`); the module-level random state is never touched.
"""
import logging
import random as _random
from typing import Any

from nestpath.core.errors import InvalidArgumentError
from nestpath.utils.structure import items_of

logger = logging.getLogger(__name__)


def _generator(rng: _random.Random | None, seed: int | None) -> _random.Random:
    if rng is not None:
        return rng
    return _random.Random(seed)


def random(
        container: Any,
        number: int | None = None,
        preserve_keys: bool = False,
        *,
        rng: _random.Random | None = None,
        seed: int | None = None,
) -> Any:
    """
    Pick random values. Without `number` a single value is returned,
    otherwise a list (or a key-preserving dict) of `number` distinct items
    in their original order.

    Asking for more items than the container holds raises
    InvalidArgumentError; the result is never silently truncated.
    """
    pairs = items_of(container)
    requested = 1 if number is None else number
    count = len(pairs)

    if requested < 0:
        raise InvalidArgumentError(f"Cannot sample a negative number of items ({requested}).")
    if requested > count:
        raise InvalidArgumentError(
            f"You requested {requested} items, but there are only {count} items available."
        )

    gen = _generator(rng, seed)
    if number is None:
        return gen.choice(pairs)[1]
    if number == 0:
        return {} if preserve_keys else []

    positions = sorted(gen.sample(range(count), number))
    logger.debug("Sampled positions %s of %s items (seed=%s)", positions, count, seed)
    chosen = [pairs[i] for i in positions]
    if preserve_keys:
        return dict(chosen)
    return [item for _, item in chosen]


def shuffle(container: Any, seed: int | None = None, *, rng: _random.Random | None = None) -> list:
    """Return the container's values in random order; reproducible with `seed`."""
    items = [item for _, item in items_of(container)]
    _generator(rng, seed).shuffle(items)
    return items
