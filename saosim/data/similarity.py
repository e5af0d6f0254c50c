"""Centering constants for the similarity functions of behavior effects.

The similarity of two values is ``1 - |a - b| / range``. Similarity based
effects subtract the average similarity observed in the data so that their
statistics are centered. Two kinds of averages are used:

- the similarity mean, over all ordered pairs of distinct actors;
- the alter similarity mean of a network, over the ordered pairs joined by
  a tie of that network.

Both pool the observations that start a period, i.e. every observation but
the last one (or the only observation when there is just one). Pairs with
a missing value on either side are left out.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import numpy as np

from saosim.data.behavior_data import BehaviorLongitudinalData
from saosim.network.network import Network

logger = logging.getLogger(__name__)


def _period_starts(data: BehaviorLongitudinalData) -> range:
    return range(max(data.observation_count - 1, 1))


def similarity_mean(data: BehaviorLongitudinalData) -> float:
    """Average similarity over all ordered pairs of distinct observed actors.

    Requires ``data.calculate_properties()`` to have run. Returns 0 when no
    observation has two observed actors.
    """
    total = 0.0
    pairs = 0
    for observation in _period_starts(data):
        observed = data.values(observation)[~data.missing_flags(observation)]
        k = observed.size
        if k < 2:
            continue
        spread = np.abs(observed[:, None] - observed[None, :]).astype(float)
        # the diagonal contributes k ones
        total += float((1.0 - spread / data.range).sum()) - k
        pairs += k * (k - 1)

    if pairs == 0:
        logger.warning("No actor pairs to average similarity over for '%s'", data.name)
        return 0.0
    return total / pairs


def alter_similarity_mean(data: BehaviorLongitudinalData, network: Network) -> float:
    """Average similarity over the ordered pairs ``(ego, alter)`` tied in ``network``.

    Returns 0 when the network has no tie between observed actors.
    """
    if network.n != data.n:
        raise ValueError(
            f"network has {network.n} actors but '{data.name}' has {data.n}"
        )
    ties = np.array(list(network.ties()), dtype=np.int64).reshape(-1, 2)
    egos, alters = ties[:, 0], ties[:, 1]

    total = 0.0
    pairs = 0
    for observation in _period_starts(data):
        values = data.values(observation)
        observed = ~data.missing_flags(observation)
        usable = observed[egos] & observed[alters]
        if not usable.any():
            continue
        spread = np.abs(values[egos[usable]] - values[alters[usable]]).astype(float)
        total += float((1.0 - spread / data.range).sum())
        pairs += int(usable.sum())

    if pairs == 0:
        logger.warning("No observed ties to average similarity over for '%s'", data.name)
        return 0.0
    return total / pairs


def center_similarities(
    data: BehaviorLongitudinalData,
    networks: Mapping[str, Network] | None = None,
) -> None:
    """Compute and store the similarity mean and the alter similarity mean
    for every named network.

    Must run before ``data.freeze()``.
    """
    data.similarity_mean = similarity_mean(data)
    for name, network in (networks or {}).items():
        data.set_similarity_means(alter_similarity_mean(data, network), name)
