"""Streamlit web application for PRD generation."""

import json

import streamlit as st
import streamlit.components.v1 as components

from prd_generator.config import get_settings
from prd_generator.ui.api_client import APIClient
from prd_generator.ui.controller import ClientController
from prd_generator.ui.utils import DOWNLOAD_MIME_TYPE, truncate_text

# Page configuration
st.set_page_config(
    page_title="PRD Generator",
    page_icon="📝",
    layout="wide",
)


def init_session_state():
    """Initialize session state and load the first idea list."""
    if "controller" not in st.session_state:
        settings = get_settings()
        st.session_state.controller = ClientController(
            APIClient(),
            copy_ack_seconds=settings.copy_ack_seconds,
        )
        st.session_state.controller.regenerate()


def copy_to_clipboard(text: str) -> None:
    """Write text to the browser clipboard."""
    components.html(
        f"<script>navigator.clipboard.writeText({json.dumps(text)});</script>",
        height=0,
    )


def render_copy_action(controller: ClientController):
    """Render the copy button and its transient acknowledgment.

    The acknowledgment shows in the same run as the click and disappears
    once copy_ack_seconds have passed.
    """
    if st.button("Copy PRD", key="copy_prd"):
        controller.copy(copy_to_clipboard)
    if controller.is_copied:
        st.success("Copied!")


# Rerun just the copy action so the acknowledgment clears on its own
copy_action = st.fragment(run_every=get_settings().copy_ack_seconds)(render_copy_action)


def render_sidebar(api_client: APIClient):
    """Render sidebar with API status."""
    with st.sidebar:
        st.subheader("API status")
        if api_client.health_check():
            st.success("✅ API connection OK")
        else:
            st.error("❌ API connection error")
            st.caption("Start the API server with `prd-generator serve`")

        st.divider()
        st.caption("PRD Generator v0.1.0")


def render_ideas_section(controller: ClientController):
    """Render the idea buttons and the regenerate button."""
    ideas = controller.state.ideas
    document = controller.state.document

    col1, col2 = st.columns([4, 1])
    with col1:
        st.subheader("Template Ideas")
    with col2:
        if st.button(
            "Loading..." if ideas.is_loading else "Regenerate",
            disabled=ideas.is_loading,
        ):
            with st.spinner("Loading ideas..."):
                controller.regenerate()
            st.rerun()

    if ideas.error_message:
        st.error(f"❌ Could not load ideas: {ideas.error_message}")
        if st.button("Dismiss", key="dismiss_ideas_error"):
            controller.dismiss_ideas_error()
            st.rerun()

    if not ideas.phrases and not ideas.is_loading:
        st.caption("No ideas found.")
        return

    columns = st.columns(4)
    for idx, phrase in enumerate(ideas.phrases):
        with columns[idx % 4]:
            selected = phrase == document.selected_phrase
            if st.button(
                truncate_text(phrase, max_length=60),
                key=f"idea_{idx}",
                help=phrase,
                type="primary" if selected else "secondary",
                disabled=document.is_loading,
                use_container_width=True,
            ):
                with st.spinner(f'Generating PRD for "{phrase}"...'):
                    controller.select_phrase(phrase)
                st.rerun()


def render_document_section(controller: ClientController):
    """Render the generated PRD with copy and download actions."""
    document = controller.state.document

    if document.error_message:
        st.error(f"❌ Could not generate PRD: {document.error_message}")
        if st.button("Dismiss", key="dismiss_document_error"):
            controller.dismiss_document_error()
            st.rerun()

    if not document.content or document.is_loading:
        return

    col1, col2, col3 = st.columns(3)
    with col1:
        copy_action(controller)
    for column, ext in ((col2, "md"), (col3, "prd")):
        download = controller.download(ext)
        if download is None:
            continue
        file_name, data = download
        with column:
            st.download_button(
                label=f"Download .{ext}",
                data=data,
                file_name=file_name,
                mime=DOWNLOAD_MIME_TYPE,
            )

    # Raw pass-through, no Markdown rendering
    st.code(document.content, language="markdown")


def main():
    """Main application entry point."""
    init_session_state()
    controller: ClientController = st.session_state.controller

    st.title("📝 Product Requirements Document Generator")

    render_sidebar(controller.api_client)
    render_ideas_section(controller)
    st.divider()
    render_document_section(controller)


if __name__ == "__main__":
    main()
