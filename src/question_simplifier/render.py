"""
Full re-render of the timeline.

``render_timeline`` recomputes the visible tree from current state every
time it is called. There is no diffing. Rendering an item consumes its
one-shot ``is_new`` flag.
"""

from typing import List, Optional

from pydantic import BaseModel

from .state import QuestionGroup, QuestionItem, TimelineState


EMPTY_MESSAGE = "No questions yet. Ask a question to get started!"


class ItemView(BaseModel):
    group_index: int
    item_index: int
    step_label: str
    simplified_label: Optional[str] = None
    description: str
    classes: List[str] = []
    understand_label: str
    understood: bool
    # When True the item shows "Simplified" + "Regenerate" instead of "Simplify".
    show_regenerate: bool
    simplify_label: str
    simplify_disabled: bool


class GroupView(BaseModel):
    group_id: int
    group_index: int
    title: str
    progress_label: str
    expanded: bool
    show_delete: bool
    items: List[ItemView] = []


class TimelineView(BaseModel):
    empty_message: Optional[str] = None
    groups: List[GroupView] = []
    delete_mode_label: str = "Delete Off"


def progress_label(count: int) -> str:
    return f"{count} {'step' if count == 1 else 'steps'}"


def simplified_label(level: int) -> Optional[str]:
    if level <= 0:
        return None
    times = "once" if level == 1 else f"{level} times"
    return f"Simplified {times} from original"


def render_item(group_index: int, item_index: int, item: QuestionItem) -> ItemView:
    classes = []
    if item.understood:
        classes.append("completed")
    if item.simplifying:
        classes.append("active")
    if item.is_new:
        classes.append("new-item")
        item.is_new = False

    return ItemView(
        group_index=group_index,
        item_index=item_index,
        step_label=f"Step {item_index + 1}",
        simplified_label=simplified_label(item.level),
        description=item.description,
        classes=classes,
        understand_label="✓ Understood" if item.understood else "○ I understand",
        understood=item.understood,
        show_regenerate=item.simplified,
        simplify_label="☰ Simplifying..." if item.simplifying else "☰ Simplify",
        simplify_disabled=item.understood or item.simplifying,
    )


def render_group(group_index: int, group: QuestionGroup, show_delete: bool) -> GroupView:
    return GroupView(
        group_id=group.id,
        group_index=group_index,
        title=group.title,
        progress_label=progress_label(len(group.items)),
        expanded=group.expanded,
        show_delete=show_delete,
        items=[render_item(group_index, idx, item) for idx, item in enumerate(group.items)],
    )


def render_timeline(state: TimelineState) -> TimelineView:
    delete_label = "Delete On" if state.show_delete_buttons else "Delete Off"
    if not state.groups:
        return TimelineView(empty_message=EMPTY_MESSAGE, delete_mode_label=delete_label)
    return TimelineView(
        groups=[
            render_group(idx, group, state.show_delete_buttons)
            for idx, group in enumerate(state.groups)
        ],
        delete_mode_label=delete_label,
    )
