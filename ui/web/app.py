import sys
import asyncio
import html
from pathlib import Path

import streamlit as st

# Make project root importable (so longspan/ works)
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from longspan.document import InMemoryDocument
from longspan.log import setup_logging
from longspan.pipeline import report_long_spans
from longspan.reconciler import HighlightReconciler
from longspan.settings import SettingsStore


def render_highlights(text: str, document: InMemoryDocument) -> str:
    """Render the document as HTML with each highlight as a <mark>."""
    color = html.escape(document.color or "")
    parts = []
    cursor = 0
    for rng in document.highlights:
        parts.append(html.escape(text[cursor:rng.start]))
        parts.append(
            f'<mark style="background-color: {color}">'
            f"{html.escape(text[rng.start:rng.end])}</mark>"
        )
        cursor = rng.end
    parts.append(html.escape(text[cursor:]))
    body = "".join(parts).replace("\n", "<br>")
    return f'<div style="line-height: 1.6">{body}</div>'


setup_logging()

st.set_page_config(
    page_title="Long Sentence Highlighter",
    layout="wide",
)

st.title("Long Sentence Highlighter")
st.caption("Highlights sentences and lines with more words than the threshold.")

if "store" not in st.session_state:
    store = SettingsStore()
    store.load()
    st.session_state["store"] = store
if "document" not in st.session_state:
    st.session_state["document"] = None
if "notices" not in st.session_state:
    st.session_state["notices"] = []

store: SettingsStore = st.session_state["store"]

reconciler = HighlightReconciler(
    get_document=lambda: st.session_state["document"],
    get_settings=store.snapshot,
    notify=st.session_state["notices"].append,
)

# --------------------------------------------------------------------
# Sidebar settings
# --------------------------------------------------------------------
st.sidebar.header("Settings")

max_words_input = st.sidebar.text_input(
    "Maximum words",
    value=str(store.snapshot().max_words),
    help="Sentences with more words than this are highlighted. Must be a positive whole number.",
)
stored_color = store.snapshot().highlight_color
color_input = st.sidebar.color_picker(
    "Highlight color",
    value=stored_color if stored_color.startswith("#") else "#FFB6C1",
    help="Applied to every highlighted sentence.",
)

settings_changed = store.update_max_words(max_words_input)
st.session_state.setdefault("last_color", color_input)
if color_input != st.session_state["last_color"]:
    st.session_state["last_color"] = color_input
    settings_changed = store.update_color(color_input) or settings_changed

# --------------------------------------------------------------------
# Document
# --------------------------------------------------------------------
default_text = (
    "This is a short sentence. This is a considerably longer sentence that "
    "exceeds the configured word threshold easily.\n\n"
    "Short lines stay plain.\n"
    "A line without a full stop but with plenty of words in it still counts as one span"
)

input_mode = st.radio("Input source", options=["Text box", "Text file"], index=0)

if input_mode == "Text box":
    user_text = st.text_area("Document", value=default_text, height=250)
else:
    uploaded = st.file_uploader("Upload a .txt or .md file", type=["txt", "md"])
    user_text = uploaded.read().decode("utf-8", errors="ignore") if uploaded else ""
    if not uploaded:
        st.info("Upload a file to get started.")

document = st.session_state["document"]
if user_text:
    if document is None:
        document = InMemoryDocument(user_text)
        st.session_state["document"] = document
        asyncio.run(reconciler.on_document_activated())
    elif document.text != user_text:
        document.set_text(user_text)
        asyncio.run(reconciler.on_document_changed())
else:
    st.session_state["document"] = None
    document = None

if settings_changed:
    asyncio.run(reconciler.on_settings_changed(store.snapshot()))

col_btn, _ = st.columns([1, 5])
with col_btn:
    if st.button("Highlight long sentences", type="primary", use_container_width=True):
        asyncio.run(reconciler.run_command())

for notice in st.session_state["notices"]:
    st.warning(notice)
st.session_state["notices"].clear()

if document is not None:
    st.subheader("Highlighted")
    st.markdown(render_highlights(document.text, document), unsafe_allow_html=True)

    rows = [
        {"line": r.line, "column": r.column, "words": r.words, "sentence": r.text}
        for r in report_long_spans(document.text, store.snapshot())
    ]
    if rows:
        st.markdown("### Long sentences")
        st.dataframe(rows, use_container_width=True)
