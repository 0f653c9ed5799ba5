"""
Timeline data model.

A timeline is an ordered list of question groups, most recent first. Each
group holds the original question at index 0 followed by its chain of
simplifications. Only the original question of each group is persisted.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional


TITLE_PLACEHOLDER = "Generating title..."


@dataclass
class QuestionItem:
    id: int
    description: str
    level: int = 0
    understood: bool = False
    simplifying: bool = False
    is_new: bool = False
    simplified: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "level": self.level,
            "understood": self.understood,
            "simplifying": self.simplifying,
            "isNew": self.is_new,
            "simplified": self.simplified,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestionItem":
        return cls(
            id=int(data["id"]),
            description=str(data.get("description", "")),
            level=int(data.get("level", 0)),
            understood=bool(data.get("understood", False)),
            simplifying=bool(data.get("simplifying", False)),
            is_new=bool(data.get("isNew", False)),
            simplified=bool(data.get("simplified", False)),
        )


@dataclass
class QuestionGroup:
    id: int
    title: str = TITLE_PLACEHOLDER
    items: List[QuestionItem] = field(default_factory=list)
    expanded: bool = False
    understood: bool = False

    def refresh_understood(self) -> None:
        self.understood = all(item.understood for item in self.items)


@dataclass
class TimelineState:
    """Owned client state: the groups plus global view flags."""

    groups: List[QuestionGroup] = field(default_factory=list)
    show_delete_buttons: bool = False
    # Highest group id issued this session; ids are never handed out twice.
    last_group_id: int = 0

    def find_group(self, group_id: int) -> Optional[QuestionGroup]:
        for group in self.groups:
            if group.id == group_id:
                return group
        return None

    def allocate_group_id(self) -> int:
        group_id = max(next_id(g.id for g in self.groups), self.last_group_id + 1)
        self.last_group_id = group_id
        return group_id


def next_id(ids: Iterable[int]) -> int:
    """One more than the largest id, or 1 for an empty collection."""
    return max(ids, default=0) + 1


def truncate_deeper(items: List[QuestionItem], index: int) -> List[QuestionItem]:
    """
    Drop the stale chain owned by ``items[index]``.

    Every item at or before ``index`` is kept. After it, only items whose
    level does not exceed the target's level survive, so a fresh child can be
    branched from the target without leaving an older deeper chain behind.
    """
    target_level = items[index].level
    return [
        item for pos, item in enumerate(items) if pos <= index or item.level <= target_level
    ]


def to_snapshot(groups: List[QuestionGroup]) -> List[Dict[str, Any]]:
    """
    Reduce groups to their persisted form.

    Only the original question is kept and the group is stored collapsed.
    The original loses its in-flight and has-child flags because its
    simplifications are not stored.
    """
    snapshot = []
    for group in groups:
        items = []
        if group.items:
            first = group.items[0].to_dict()
            first.update({"simplifying": False, "isNew": False, "simplified": False})
            items.append(first)
        snapshot.append(
            {"id": group.id, "title": group.title, "items": items, "expanded": False}
        )
    return snapshot


def from_snapshot(data: List[Dict[str, Any]]) -> List[QuestionGroup]:
    groups = []
    for raw in data:
        group = QuestionGroup(
            id=int(raw["id"]),
            title=str(raw.get("title", TITLE_PLACEHOLDER)),
            items=[QuestionItem.from_dict(item) for item in raw.get("items", [])[:1]],
            expanded=False,
        )
        group.refresh_understood()
        groups.append(group)
    return groups
