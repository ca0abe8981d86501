from __future__ import annotations

import logging

from engine.storage.kv_store import KeyValueStore
from games.spark.const import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


def load_high_score(store: KeyValueStore, key: str = HIGH_SCORE_KEY) -> int:
    value = store.get(key)
    if value is None or value < 0:
        return 0
    return value


def record_high_score(store: KeyValueStore, score: int, key: str = HIGH_SCORE_KEY) -> int:
    """Persist score if it beats the stored best; returns the best after the call."""
    previous = load_high_score(store, key)
    if score <= previous:
        return previous
    if not store.set(key, score):
        logger.warning("new high score %d was not saved", score)
    else:
        logger.info("new high score %d (was %d)", score, previous)
    return score
