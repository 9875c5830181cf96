from typing import FrozenSet

from app.schemas.common import ActivityType, ProspectPriority, ProspectStatus

PROSPECT_STATUSES: FrozenSet[str] = frozenset(s.value for s in ProspectStatus)
PROSPECT_PRIORITIES: FrozenSet[str] = frozenset(p.value for p in ProspectPriority)
ACTIVITY_TYPES: FrozenSet[str] = frozenset(a.value for a in ActivityType)

DEFAULT_STATUS: str = ProspectStatus.new.value
DEFAULT_PRIORITY: str = ProspectPriority.medium.value


def _in_clause(column: str, values: FrozenSet[str]) -> str:
    return f"{column} IN ({', '.join(repr(v) for v in sorted(values))})"


STATUS_CHECK_CLAUSE: str = _in_clause("status", PROSPECT_STATUSES)
PRIORITY_CHECK_CLAUSE: str = _in_clause("priority", PROSPECT_PRIORITIES)
ACTIVITY_TYPE_CHECK_CLAUSE: str = _in_clause("activity_type", ACTIVITY_TYPES)
