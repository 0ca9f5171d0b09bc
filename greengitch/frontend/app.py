"""Streamlit page: pick a city and climate issue, then generate awareness images.

Run with ``streamlit run greengitch/frontend/app.py`` while the API is up.
"""

import logging

import httpx
import streamlit as st

from greengitch.climate_issues import list_cities
from greengitch.config import get_settings
from greengitch.frontend.client import GenerationFailed, GreenGitchApiClient
from greengitch.frontend.share import (
    SHARE_PLATFORMS,
    download_filename,
    download_mime_type,
    share_url,
)
from greengitch.frontend.state import (
    ErrorShown,
    Idle,
    can_generate,
    can_select_issue,
    generation_failed,
    generation_succeeded,
    issue_options,
    select_city,
    select_issue,
    selected_city,
    start_generation,
    visible_cards,
)

logger = logging.getLogger(__name__)

SKELETON_HTML = (
    '<div style="width:100%;height:300px;border-radius:0.5rem;'
    'background:#e5e7eb;margin-bottom:1rem;"></div>'
)
SHARE_LABELS = {"twitter": "X / Twitter", "facebook": "Facebook", "instagram": "Instagram"}

st.set_page_config(page_title="GreenGitch", page_icon="🌱", layout="centered")

# --- Session State ---
if "ui_state" not in st.session_state:
    st.session_state["ui_state"] = Idle()
if "pending_toast" not in st.session_state:
    st.session_state["pending_toast"] = None

settings = get_settings()
api = GreenGitchApiClient(settings.backend_url)


def _on_city_change():
    city = st.session_state["city_select"]
    st.session_state["ui_state"] = select_city(st.session_state["ui_state"], city) if city else Idle()


def _on_issue_change(key):
    issue = st.session_state[key]
    state = st.session_state["ui_state"]
    if issue:
        st.session_state["ui_state"] = select_issue(state, issue)
    else:
        st.session_state["ui_state"] = select_city(state, selected_city(state))


def _render_skeletons(count):
    for _ in range(count):
        st.markdown(SKELETON_HTML, unsafe_allow_html=True)


def _render_card(index, image, city, issue):
    badge = f"{image.provider} (placeholder, not generated)" if image.placeholder else image.provider
    st.caption(badge)

    try:
        data = api.fetch_image_bytes(image.url)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
        logger.warning("Could not load image %s: %s", index + 1, exc)
        st.warning("This image could not be loaded.")
        return

    mime_type = download_mime_type(image.url)
    if mime_type == "image/svg+xml":
        st.image(data.decode("utf-8"), caption=f"Climate awareness image {index + 1}")
    else:
        st.image(data, caption=f"Climate awareness image {index + 1}")

    columns = st.columns(1 + len(SHARE_PLATFORMS))
    with columns[0]:
        st.download_button(
            "Save",
            data=data,
            file_name=download_filename(image.url),
            mime=mime_type,
            key=f"download-{index}",
        )
    for column, platform in zip(columns[1:], SHARE_PLATFORMS):
        with column:
            st.link_button(SHARE_LABELS[platform], share_url(platform, city, issue, settings.public_url))


st.title("🌱 GreenGitch")
st.markdown("Visualise what climate change means for a city, then share it.")

toast = st.session_state["pending_toast"]
if toast:
    st.toast(toast, icon="⚠️")
    st.session_state["pending_toast"] = None

state = st.session_state["ui_state"]
city = selected_city(state)

st.selectbox(
    "City",
    list_cities(),
    index=None,
    placeholder="Select a city",
    key="city_select",
    on_change=_on_city_change,
)

# Keyed per city so switching cities always starts with an empty issue choice.
issue_key = f"issue_select_{city or 'none'}"
st.selectbox(
    "Climate issue",
    issue_options(state),
    index=None,
    placeholder="Select climate issue",
    key=issue_key,
    disabled=not can_select_issue(state),
    on_change=_on_issue_change,
    args=(issue_key,),
)

generate_clicked = st.button(
    "Generate Awareness Images",
    type="primary",
    disabled=not can_generate(state),
    use_container_width=True,
)

results = st.container()

if generate_clicked:
    state = start_generation(state)
    st.session_state["ui_state"] = state
    with results:
        _render_skeletons(visible_cards(state)[1])

    try:
        images = api.generate(state.city, state.issue)
    except GenerationFailed as exc:
        logger.error("Error generating images: %s", exc)
        state = generation_failed(state)
    except Exception:  # pragma: no cover - keep the page usable after unexpected errors
        logger.exception("Unexpected error while generating images")
        state = generation_failed(state)
    else:
        state = generation_succeeded(state, images)

    if isinstance(state, ErrorShown):
        st.session_state["pending_toast"] = state.message
    st.session_state["ui_state"] = state
    st.rerun()

cards = visible_cards(state)
if cards is not None:
    kind, payload = cards
    with results:
        if kind == "skeleton":
            _render_skeletons(payload)
        else:
            for index, image in enumerate(payload):
                _render_card(index, image, state.city, state.issue)
