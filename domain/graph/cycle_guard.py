from enum import Enum


class CycleGuard(str, Enum):
	# reject only an immediate A -> B -> A oscillation
	LOOKBACK = 'lookback'
	# reject any currency already on the branch
	VISITED = 'visited'
