"""
Streamlit-based web UI for the Question Simplifier.

Run with:
    streamlit run ui_app.py

The relay (python main.py) must be running at settings.api_base_url.
"""

import asyncio

import streamlit as st

from question_simplifier.controller import DELETE_CONFIRMATION, TimelineController
from question_simplifier.render import GroupView, ItemView


def get_controller() -> TimelineController:
    if "controller" not in st.session_state:
        controller = TimelineController()
        controller.load()
        st.session_state.controller = controller
    return st.session_state.controller


async def ask(controller: TimelineController, text: str) -> None:
    task = await controller.submit(text)
    if task is not None:
        await task


def on_ask() -> None:
    controller = get_controller()
    asyncio.run(ask(controller, st.session_state.question_input))
    st.session_state.question_input = ""


def draw_item(controller: TimelineController, group: GroupView, item: ItemView) -> None:
    with st.container(border=True):
        header = f"**{item.step_label}**"
        if "new-item" in item.classes:
            header += " :green[new]"
        if item.simplified_label:
            header += f"  \n:gray[{item.simplified_label}]"
        st.markdown(header)
        st.write(item.description)

        key = f"{group.group_id}-{item.item_index}"
        cols = st.columns(3)
        if cols[0].button(item.understand_label, key=f"understand-{key}"):
            controller.toggle_understood(item.group_index, item.item_index)
            st.rerun()
        if item.show_regenerate:
            cols[1].button("✓ Simplified", key=f"simplified-{key}", disabled=True)
            if cols[2].button("⟳ Regenerate", key=f"regenerate-{key}"):
                controller.regenerate(item.group_index, item.item_index)
                st.rerun()
        elif cols[1].button(item.simplify_label, key=f"simplify-{key}", disabled=item.simplify_disabled):
            with st.spinner("Simplifying..."):
                asyncio.run(controller.simplify(item.group_index, item.item_index))
            st.rerun()


def draw_group(controller: TimelineController, group: GroupView) -> None:
    header, toggle = st.columns([12, 1])
    header.subheader(f"{group.title}  :gray[{group.progress_label}]")
    if toggle.button("▲" if group.expanded else "▼", key=f"toggle-{group.group_id}"):
        controller.toggle_expanded(group.group_index)
        st.rerun()

    if group.show_delete:
        pending = st.session_state.get("pending_delete")
        if pending == group.group_id:
            st.warning(DELETE_CONFIRMATION)
            yes, no = st.columns(2)
            if yes.button("Yes, delete", key=f"confirm-{group.group_id}"):
                controller.delete_group(group.group_id, confirm=lambda _message: True)
                st.session_state.pending_delete = None
                st.rerun()
            if no.button("Cancel", key=f"cancel-{group.group_id}"):
                st.session_state.pending_delete = None
                st.rerun()
        elif st.button("×", key=f"delete-{group.group_id}"):
            st.session_state.pending_delete = group.group_id
            st.rerun()

    if group.expanded:
        for item in group.items:
            draw_item(controller, group, item)
    st.divider()


def main() -> None:
    st.set_page_config(page_title="Question Simplifier", layout="wide")
    st.title("Question Simplifier")
    st.write(
        "Paste a problem you are stuck on. Simplify it step by step until each "
        "step makes sense."
    )

    controller = get_controller()

    st.text_area("Your question", key="question_input")
    st.button("Ask", on_click=on_ask, type="primary")

    # Every controller operation re-renders; draw the latest view.
    view = controller.view
    if st.button(view.delete_mode_label):
        controller.toggle_delete_mode()
        st.rerun()

    if view.empty_message:
        st.info(view.empty_message)
        return

    for group in view.groups:
        draw_group(controller, group)


if __name__ == "__main__":
    main()
