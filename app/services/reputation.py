# app/services/reputation.py
import random
from typing import Optional, Protocol

PLATFORM_RATING = 4.9
PLATFORM_REVIEW_COUNT = 1250


class ReputationPolicy(Protocol):
	def for_forwarder(self, forwarder_id: str) -> tuple[float, int]:
		...


class FixedReputation:
	def __init__(self, rating: float = 5.0, review_count: int = 25):
		self.rating = rating
		self.review_count = review_count
	
	def for_forwarder(self, forwarder_id: str) -> tuple[float, int]:
		return self.rating, self.review_count


class RandomReputation:
	"""
	Placeholder social proof until forwarder reviews are collected.
	With a seed the values depend only on (seed, forwarder), without one they change per call.
	"""
	
	def __init__(self, seed: Optional[int] = None):
		self.seed = seed
	
	def for_forwarder(self, forwarder_id: str) -> tuple[float, int]:
		rng = random.Random(f"{self.seed}:{forwarder_id}") if self.seed is not None else random.Random()
		rating = round(rng.uniform(4.0, 5.0), 1)
		review_count = rng.randint(5, 300)
		return rating, review_count
