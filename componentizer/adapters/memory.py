from collections.abc import Mapping, Sequence

from componentizer.domain.entities import ComponentId, SubjectId, normalize_id


def _normalized(ids: Sequence[ComponentId]) -> list[ComponentId]:
    return [normalize_id(c) for c in ids]


class InMemoryContentRepo:
    """
    Content repository holding component assignments in memory.

    Discovery falls back to every configured component, in configuration order,
    for subjects without explicitly discovered ids. Subject and component ids
    are stored in canonical form, so "7" and 7 are the same subject.
    """

    def __init__(
        self,
        orders: Mapping[SubjectId, Sequence[ComponentId]] | None = None,
        discovered: Mapping[SubjectId, Sequence[ComponentId]] | None = None,
        configured: Sequence[ComponentId] = (),
    ) -> None:
        self._orders: dict[SubjectId, list[ComponentId]] = {
            normalize_id(k): _normalized(v) for k, v in (orders or {}).items()
        }
        self._discovered: dict[SubjectId, list[ComponentId]] = {
            normalize_id(k): _normalized(v) for k, v in (discovered or {}).items()
        }
        self._configured = _normalized(configured)

    def save_component_order(self, subject_id: SubjectId, order: Sequence[ComponentId]) -> None:
        self._orders[normalize_id(subject_id)] = _normalized(order)

    def delete_component_order(self, subject_id: SubjectId) -> None:
        self._orders.pop(normalize_id(subject_id), None)

    def get_raw_component_order(self, subject_id: SubjectId | None) -> list[ComponentId]:
        if subject_id is None:
            return []
        return list(self._orders.get(normalize_id(subject_id), []))

    def discover_component_ids(self, subject_id: SubjectId | None) -> list[ComponentId]:
        if subject_id is not None:
            discovered = self._discovered.get(normalize_id(subject_id))
            if discovered is not None:
                return list(discovered)
        return list(self._configured)
