"""Study session ordering.

Words are split into high, medium and low priority buckets, each bucket is
shuffled, and the buckets are interleaved by a weighted draw so that words
needing attention tend to come up earlier and more often. The guarantee is
statistical only: any single session may deviate from the bias.
"""
import logging
import random
from dataclasses import dataclass
from datetime import datetime, UTC
from typing import Dict, List, Optional, Sequence, TypeVar

from learndeck.config import settings
from learndeck.models.models import Difficulty, Word
from learndeck.models.session_models import PriorityBucket
from learndeck.services.random_utils import get_rng, shuffle

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class BucketPolicy:
    """How eagerly a bucket is drawn from while interleaving.

    A bucket with remaining items is taken at a position when
    position < position_cutoff and a draw succeeds with draw_probability,
    when lead_with_first is set and nothing was taken from it yet,
    or when every other bucket is exhausted.
    """
    bucket: PriorityBucket
    draw_probability: float = 1.0
    position_cutoff: float = 1.0
    lead_with_first: bool = False


def default_policies() -> List[BucketPolicy]:
    """Bucket policies in the order they are tried at each position."""
    cfg = settings.session
    return [
        BucketPolicy(
            PriorityBucket.HIGH,
            draw_probability=cfg.high_draw_probability,
            position_cutoff=cfg.high_position_cutoff,
            lead_with_first=True,
        ),
        BucketPolicy(PriorityBucket.MEDIUM, draw_probability=cfg.medium_draw_probability),
        BucketPolicy(PriorityBucket.LOW),
    ]


class WeightedBucketScheduler:
    """Merges several ordered buckets into one sequence by weighted draws."""

    def __init__(
        self,
        policies: Optional[List[BucketPolicy]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.policies = policies if policies is not None else default_policies()
        self.rng = get_rng(rng)

    def _draw(self, probability: float) -> bool:
        if probability >= 1:
            return True
        if probability <= 0:
            return False
        return self.rng.random() < probability

    def _accepts(
        self,
        policy: BucketPolicy,
        position: float,
        remaining: Dict[PriorityBucket, int],
        taken: Dict[PriorityBucket, int],
    ) -> bool:
        if remaining[policy.bucket] == 0:
            return False
        if position < policy.position_cutoff and self._draw(policy.draw_probability):
            return True
        if policy.lead_with_first and taken[policy.bucket] == 0:
            return True
        return all(count == 0 for bucket, count in remaining.items() if bucket != policy.bucket)

    def _choose(
        self,
        position: float,
        remaining: Dict[PriorityBucket, int],
        taken: Dict[PriorityBucket, int],
    ) -> PriorityBucket:
        for policy in self.policies:
            if self._accepts(policy, position, remaining, taken):
                return policy.bucket
        # Buckets without a policy are only drawn from here, after the others
        for bucket, count in remaining.items():
            if count > 0:
                return bucket
        raise RuntimeError("No bucket has items left")

    def interleave(self, buckets: Dict[PriorityBucket, Sequence[T]]) -> List[T]:
        """Merge the buckets, consuming each one front to back."""
        items = {policy.bucket: list(buckets.get(policy.bucket, [])) for policy in self.policies}
        for bucket, bucket_items in buckets.items():
            items.setdefault(bucket, list(bucket_items))
        taken = {bucket: 0 for bucket in items}
        total = sum(len(bucket_items) for bucket_items in items.values())

        result: List[T] = []
        for i in range(total):
            remaining = {bucket: len(items[bucket]) - taken[bucket] for bucket in items}
            bucket = self._choose(i / total, remaining, taken)
            result.append(items[bucket][taken[bucket]])
            taken[bucket] += 1
        return result


def days_since_last_review(word: Word, now: datetime) -> int:
    """Whole days since the last answer, 0 for words never answered."""
    if word.last_reviewed is None:
        return 0
    return (now - word.last_reviewed).days


def classify(word: Word, now: Optional[datetime] = None) -> PriorityBucket:
    """Assign a word to a priority bucket."""
    now = now or datetime.now(UTC)
    cfg = settings.session

    days_since = days_since_last_review(word, now)
    is_overdue = word.next_review < now
    has_low_accuracy = word.accuracy is not None and word.accuracy < cfg.low_accuracy_threshold

    if has_low_accuracy or (is_overdue and days_since > cfg.overdue_days) or word.difficulty == Difficulty.FAILED:
        return PriorityBucket.HIGH
    if word.difficulty == Difficulty.LEARNING or (is_overdue and days_since <= cfg.overdue_days):
        return PriorityBucket.MEDIUM
    return PriorityBucket.LOW


def prioritize(
    words: Sequence[Word],
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
    policies: Optional[List[BucketPolicy]] = None,
) -> List[Word]:
    """Order words for a study session, favouring struggling and overdue words."""
    if not words:
        return []
    now = now or datetime.now(UTC)
    rng = get_rng(rng)

    groups: Dict[PriorityBucket, List[Word]] = {bucket: [] for bucket in PriorityBucket}
    for word in words:
        groups[classify(word, now)].append(word)
    logger.debug(
        "Priority buckets: "
        + ", ".join(f"{bucket.value}={len(group)}" for bucket, group in groups.items())
    )

    shuffled = {bucket: shuffle(group, rng) for bucket, group in groups.items()}
    if len(words) <= settings.session.small_session_size:
        return shuffle(
            shuffled[PriorityBucket.HIGH] + shuffled[PriorityBucket.MEDIUM] + shuffled[PriorityBucket.LOW],
            rng,
        )

    return WeightedBucketScheduler(policies, rng).interleave(shuffled)


def randomize_within_difficulty(
    words: Sequence[Word], rng: Optional[random.Random] = None
) -> List[Word]:
    """Shuffle each difficulty group and lay the groups out from weakest to strongest."""
    rng = get_rng(rng)
    grouped: Dict[Difficulty, List[Word]] = {}
    for word in words:
        grouped.setdefault(word.difficulty, []).append(word)

    result: List[Word] = []
    for name in settings.session.difficulty_order:
        result.extend(shuffle(grouped.get(Difficulty(name), []), rng))
    return result
