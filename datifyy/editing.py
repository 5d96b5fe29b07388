"""
Optimistic editing of one profile or preferences section.

The local copy is changed immediately and the save runs afterwards; if the save
fails the section is rolled back to the snapshot taken before the change.

	CLEAN --apply--> PENDING --ok--> CLEAN
	                 PENDING --error--> REVERTING --restored--> CLEAN
"""
import copy
import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

# save(changes, version) -> (server_data, new_version)
SaveFn = Callable[[Dict[str, Any], Optional[str]], Tuple[Dict[str, Any], Optional[str]]]


class EditState(str, Enum):
	CLEAN = "clean"
	PENDING = "pending"
	REVERTING = "reverting"


class EditInProgressError(Exception):
	pass


class SectionEditor:
	def __init__(self, name: str, data: Dict[str, Any], version: Optional[str] = None):
		self.name = name
		self.data = copy.deepcopy(data)
		self.version = version
		self.state = EditState.CLEAN

	def apply(self, changes: Dict[str, Any], save: SaveFn) -> Dict[str, Any]:
		if self.state is not EditState.CLEAN:
			raise EditInProgressError(f"Section {self.name} is {self.state.value}")

		snapshot = copy.deepcopy(self.data)
		self.data.update(copy.deepcopy(changes))
		self.state = EditState.PENDING

		try:
			server_data, version = save(changes, self.version)
		except Exception:
			self.state = EditState.REVERTING
			logger.warning(f"Save failed for section {self.name}, reverting {sorted(changes)}")
			self.data = snapshot
			self.state = EditState.CLEAN
			raise

		self.data = copy.deepcopy(server_data)
		self.version = version
		self.state = EditState.CLEAN
		return self.data
