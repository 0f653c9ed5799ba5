"""
Timeline controller: the single owner of client state.

Every mutation runs through a ``TimelineController`` method and is followed
by a persist-and-redraw cycle. Network results (titles, simplifications)
arrive later as independently resolved tasks and are applied only if their
target still exists.
"""

import asyncio
import logging
from typing import Callable, List, Optional

from .core import create_fallback_title
from .relay_client import RelayClient
from .render import TimelineView, render_timeline
from .state import QuestionGroup, QuestionItem, TimelineState, next_id, truncate_deeper
from .storage import LocalStorage, load_groups, save_groups


logger = logging.getLogger(__name__)

DELETE_CONFIRMATION = "Are you sure you want to delete this question from history?"


class TimelineController:
    def __init__(
        self,
        storage: Optional[LocalStorage] = None,
        relay: Optional[RelayClient] = None,
        renderer: Optional[Callable[[TimelineView], None]] = None,
    ) -> None:
        self.storage = storage or LocalStorage()
        self.relay = relay or RelayClient()
        self.renderer = renderer
        self.state = TimelineState()
        self.view: TimelineView = TimelineView()
        # Items with a simplify request outstanding, compared by identity.
        self._in_flight: List[QuestionItem] = []

    # -- persist / render cycle ------------------------------------------

    def load(self) -> TimelineView:
        self.state.groups = load_groups(self.storage)
        self.state.last_group_id = max((g.id for g in self.state.groups), default=0)
        return self.render()

    def persist(self) -> None:
        save_groups(self.storage, self.state.groups)

    def render(self) -> TimelineView:
        self.view = render_timeline(self.state)
        if self.renderer is not None:
            self.renderer(self.view)
        return self.view

    def _commit(self) -> None:
        self.persist()
        self.render()

    # -- operations -------------------------------------------------------

    async def submit(self, text: str) -> Optional["asyncio.Task[None]"]:
        """
        Add a new question group at the top of the timeline.

        Returns the task resolving the group's title, or None when ``text``
        is blank and nothing was added.
        """
        question = (text or "").strip()
        if not question:
            return None

        group = QuestionGroup(
            id=self.state.allocate_group_id(),
            items=[QuestionItem(id=1, description=question)],
            expanded=True,
        )
        self.state.groups.insert(0, group)
        self._commit()

        return asyncio.create_task(self._resolve_title(group.id, question))

    async def _resolve_title(self, group_id: int, question: str) -> None:
        try:
            title = await self.relay.generate_title(question)
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("Title generation failed for group %s: %s", group_id, exc)
            title = ""

        group = self.state.find_group(group_id)
        if group is None:
            logger.info("Group %s was deleted before its title arrived", group_id)
            return
        group.title = title.strip() or create_fallback_title(question)
        self._commit()

    async def simplify(self, group_index: int, item_index: int) -> bool:
        """
        Request a simplification of one item and branch it into the chain.

        Returns True when a new item was inserted. A second request for an
        item whose earlier request is still outstanding is refused, even if
        toggling understood cleared its ``simplifying`` flag meanwhile.
        """
        group = self.state.groups[group_index]
        item = group.items[item_index]
        if any(pending is item for pending in self._in_flight):
            return False

        inserted = False
        self._in_flight.append(item)
        item.simplifying = True
        self.render()
        try:
            simplified = await self.relay.simplify(item.description)
            index = self._locate(group, item) if simplified else None
            if index is not None:
                group.items = truncate_deeper(group.items, index)
                group.items.insert(
                    index + 1,
                    QuestionItem(
                        id=next_id(i.id for i in group.items),
                        description=simplified,
                        level=item.level + 1,
                        is_new=True,
                    ),
                )
                item.simplified = True
                group.expanded = True
                group.refresh_understood()
                inserted = True
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("Simplification failed for group %s: %s", group.id, exc)
        finally:
            self._in_flight = [pending for pending in self._in_flight if pending is not item]
            item.simplifying = False
            self._commit()
        return inserted

    def _locate(self, group: QuestionGroup, item: QuestionItem) -> Optional[int]:
        """Current index of ``item``, or None if it or its group is gone."""
        if self.state.find_group(group.id) is not group:
            logger.info("Group %s was deleted before its simplification arrived", group.id)
            return None
        for index, existing in enumerate(group.items):
            if existing is item:
                return index
        logger.info("Item %s was pruned before its simplification arrived", item.id)
        return None

    def regenerate(self, group_index: int, item_index: int) -> None:
        group = self.state.groups[group_index]
        item = group.items[item_index]
        group.items = truncate_deeper(group.items, item_index)
        item.simplified = False
        group.refresh_understood()
        self._commit()

    def toggle_understood(self, group_index: int, item_index: int) -> None:
        group = self.state.groups[group_index]
        item = group.items[item_index]
        item.understood = not item.understood
        if item.understood:
            item.simplifying = False
        group.refresh_understood()
        self._commit()

    def toggle_expanded(self, group_index: int) -> None:
        group = self.state.groups[group_index]
        group.expanded = not group.expanded
        self.render()

    def delete_group(self, group_id: int, confirm: Callable[[str], bool]) -> bool:
        """Remove a group after the user confirms. Deletion is irreversible."""
        if not confirm(DELETE_CONFIRMATION):
            return False
        before = len(self.state.groups)
        self.state.groups = [g for g in self.state.groups if g.id != group_id]
        self._commit()
        return len(self.state.groups) < before

    def toggle_delete_mode(self) -> bool:
        self.state.show_delete_buttons = not self.state.show_delete_buttons
        self.render()
        if not self.state.show_delete_buttons:
            # Leaving delete mode commits the current state.
            self.persist()
        return self.state.show_delete_buttons
