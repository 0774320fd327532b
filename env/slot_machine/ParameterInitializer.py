import math
import logging
import numbers
from urllib.parse import parse_qs
from typing import Any, NamedTuple, Optional, Sequence, Union

import numpy as np


class ArmParams(NamedTuple):
    mean: Union[int, float]
    stddev: Union[int, float]


# Red, blue and green interventions of the demo
DEFAULT_ARM_PARAMS: list[ArmParams] = [ArmParams(400, 150), ArmParams(600, 150), ArmParams(800, 150)]
CONFIGURED_STDDEV = 150
MEANS_QUERY_KEY = "means"


def _to_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        if math.isfinite(value) and float(value).is_integer():
            return int(value)
        return None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def parse_configured_means(raw: Any) -> Optional[list[int]]:
    """
    Read a list of true means from the session configuration.

    Accepted forms: None, a sequence of ints, a comma separated string ("300,300,300") or a query string
    ("?means=300,300,300"). Any entry which is not a finite integer makes the whole configuration invalid.
    :param raw: configuration value
    :return: the list of means, or None if nothing usable was supplied
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        text = raw.strip()
        if "=" in text:
            values = parse_qs(text.lstrip("?")).get(MEANS_QUERY_KEY)
            if not values:
                return None
            text = values[0]
        if not text:
            return None
        entries: Sequence[Any] = text.split(",")
    elif hasattr(raw, '__iter__'):
        entries = list(raw)
    else:
        logging.warning(f"Ignoring configured means of type {type(raw)}")
        return None

    means = [_to_int(entry) for entry in entries]
    if len(means) == 0 or any(mean is None for mean in means):
        logging.warning(f"Ignoring malformed configured means: {raw!r}")
        return None
    return means


def fisher_yates_shuffle(items: Sequence[Any], rng: np.random.Generator) -> list[Any]:
    """
    Return a uniformly permuted copy of items: from the last index down to 1, swap element i with an element
    picked uniformly in [0, i].
    """
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def init_arm_params(base_params: Optional[Sequence[tuple]]=None, configured_means: Any=None,
                    rng: Optional[np.random.Generator]=None, seed: Optional[int]=None) -> list[ArmParams]:
    """
    Derive the true (hidden) reward parameters of each arm.

    If the configured means have one valid integer per arm they are used in the given order with a stddev of
    CONFIGURED_STDDEV. Otherwise the (mean, stddev) pairs of base_params are shuffled as units.
    :param base_params: ordered (mean, stddev) pairs, DEFAULT_ARM_PARAMS if None
    :param configured_means: raw configuration, see parse_configured_means
    :param rng: numpy generator used for the shuffle
    :param seed: seed of a new generator, used only when rng is None
    :return: list of ArmParams, one per arm
    """
    base_params = [ArmParams(*params) for params in (DEFAULT_ARM_PARAMS if base_params is None else base_params)]
    assert len(base_params) > 0, "base_params should contain at least one arm"

    means = parse_configured_means(configured_means)
    if means is not None:
        if len(means) == len(base_params):
            logging.info(f"Using configured means: {means}")
            return [ArmParams(mean, CONFIGURED_STDDEV) for mean in means]
        logging.warning(f"Configured means {means} do not match the {len(base_params)} arms, "
                        f"falling back to shuffled defaults")

    rng = rng if rng is not None else np.random.default_rng(seed)
    return fisher_yates_shuffle(base_params, rng)
