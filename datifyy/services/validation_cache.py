import copy
import time
from typing import Any, Callable, Dict, Iterable, Optional

from datifyy.config import VALIDATION_CACHE_TTL_SECONDS

# Sentinel distinguishing "no cached entry" from a cached None (field passed)
MISS = object()


def same_value(a: Any, b: Any) -> bool:
	"""Deep equality that also requires matching types, so 0 never hits a cached False"""
	if type(a) is not type(b):
		return False
	if isinstance(a, (list, tuple)):
		return len(a) == len(b) and all(same_value(x, y) for x, y in zip(a, b))
	if isinstance(a, dict):
		return a.keys() == b.keys() and all(same_value(a[k], b[k]) for k in a)
	return a == b


class ValidationCache:
	"""
	Per-session cache of field validation results.

	Entries are keyed by field name and hold the validated value, the result and the
	time it was stored. A lookup only hits when the value is unchanged and the entry
	is younger than the TTL; expired entries are purged on every lookup.
	"""

	def __init__(self, ttl_seconds: float = VALIDATION_CACHE_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
		self.ttl_seconds = ttl_seconds
		self._clock = clock
		self._entries: Dict[str, Dict[str, Any]] = {}

	def __len__(self) -> int:
		return len(self._entries)

	def __contains__(self, field_name: str) -> bool:
		return field_name in self._entries

	def purge_expired(self) -> int:
		now = self._clock()
		expired = [name for name, entry in self._entries.items() if now - entry["timestamp"] > self.ttl_seconds]
		for name in expired:
			del self._entries[name]
		return len(expired)

	def get(self, field_name: str, value: Any) -> Any:
		"""Return the cached result, or MISS"""
		self.purge_expired()
		entry = self._entries.get(field_name)
		if entry is not None and same_value(entry["value"], value):
			return entry["result"]
		return MISS

	def set(self, field_name: str, value: Any, result: Optional[Any]) -> None:
		self._entries[field_name] = {
			# Copy so later mutation of a caller's list cannot alias the cached value
			"value": copy.deepcopy(value),
			"result": result,
			"timestamp": self._clock(),
		}

	def invalidate(self, field_names: Iterable[str]) -> None:
		for name in field_names:
			self._entries.pop(name, None)

	def clear(self) -> None:
		self._entries = {}
