import html
import logging
from typing import List

import streamlit as st

from til.categories import ALL_CATEGORIES, CATEGORIES, UnknownCategoryError, category_color, category_names
from til.config import configure_logging, load_settings
from til.data import facts_to_frame, try_load_facts
from til.facts import MAX_TEXT_LENGTH, Fact
from til.filters import filter_facts
from til.form import FactDraft, chars_remaining, submit_fact
from til.state import AppState, select_category, toggle_form, with_facts
from til.summary import breakdown_chart, category_breakdown, facts_message

APP_TITLE = "Today I Learned"
STATE_KEY = "til_state"

settings = load_settings()
configure_logging(settings)
logger = logging.getLogger("til.app")


# ---------- UI / layout helpers ----------
def inject_base_styles():
    # Emitted on every run; reruns drop elements they do not render.
    st.markdown(
        """
        <style>
        .app-header {display: flex;align-items: center;gap: 12px;padding: 6px 0 4px;margin-bottom: 10px;}
        .app-header .title {font-size: 2.2rem;font-weight: 700;text-transform: uppercase;letter-spacing: -1px;}
        .fact {display: flex;align-items: center;gap: 16px;background: #44403c;color: #fafaf9;border-radius: 16px;
               padding: 14px 20px;margin-bottom: 12px;font-size: 1.05rem;}
        .fact p {margin: 0;flex: 1;}
        .fact .source {color: #a8a29e;margin-left: 10px;text-decoration: none;}
        .fact .source:hover {color: #3b82f6;}
        .tag {text-transform: uppercase;font-size: 0.8rem;padding: 2px 10px;border-radius: 100px;color: #fafaf9;}
        .vote-buttons {display: flex;gap: 8px;}
        .vote {background: #78716c;border-radius: 100px;padding: 4px 10px;font-weight: 600;}
        .chip {display: inline-block;width: 10px;height: 10px;border-radius: 50%;margin-right: 6px;}
        </style>
        """,
        unsafe_allow_html=True,
    )


def get_state() -> AppState:
    return st.session_state[STATE_KEY]


def set_state(state: AppState) -> None:
    st.session_state[STATE_KEY] = state


def reset_draft_inputs() -> None:
    st.session_state["draft_text"] = ""
    st.session_state["draft_source"] = ""
    st.session_state["draft_category"] = ""


# ---------- Callbacks (run before the rerun, so widget keys may be reset) ----------
def on_toggle_form():
    set_state(toggle_form(get_state()))
    st.session_state["form_errors"] = []


def on_select_category(name: str):
    set_state(select_category(get_state(), name))


def on_submit_fact():
    draft = FactDraft(
        text=st.session_state.get("draft_text", ""),
        source=st.session_state.get("draft_source", ""),
        category=st.session_state.get("draft_category", ""),
    )
    result = submit_fact(get_state(), draft)
    set_state(result.state)
    st.session_state["form_errors"] = result.errors
    if result.accepted:
        reset_draft_inputs()


# ---------- Components ----------
def render_header(state: AppState):
    c1, c2 = st.columns([5, 1])
    with c1:
        st.markdown(f"<div class='app-header'><div class='title'>{APP_TITLE}</div></div>", unsafe_allow_html=True)
    with c2:
        st.button(
            "Close" if state.show_form else "Share a fact",
            key="toggle_form",
            on_click=on_toggle_form,
            use_container_width=True,
        )


def render_new_fact_form():
    # Outside st.form so every committed edit refreshes the counter.
    st.text_input("Fact", key="draft_text", placeholder="Share a fact with the world...")
    st.caption(f"{chars_remaining(st.session_state.get('draft_text', ''))} of {MAX_TEXT_LENGTH} characters left")
    st.text_input("Source", key="draft_source", placeholder="Trustworthy source...")
    st.selectbox(
        "Category",
        options=[""] + category_names(),
        key="draft_category",
        format_func=lambda v: "Choose category:" if not v else v.upper(),
    )
    st.button("Post", key="post_fact", on_click=on_submit_fact)
    for err in st.session_state.get("form_errors", []):
        st.error(err)


def render_category_filter(state: AppState):
    st.markdown("### Categories")
    st.button(
        "All",
        key="cat_all",
        on_click=on_select_category,
        args=(ALL_CATEGORIES,),
        type="primary" if state.current_category == ALL_CATEGORIES else "secondary",
        use_container_width=True,
    )
    for category in CATEGORIES:
        chip, button = st.columns([1, 8])
        chip.markdown(
            f"<span class='chip' style='background-color:{category.color}'></span>",
            unsafe_allow_html=True,
        )
        button.button(
            category.name.upper(),
            key=f"cat_{category.name}",
            on_click=on_select_category,
            args=(category.name,),
            type="primary" if state.current_category == category.name else "secondary",
            use_container_width=True,
        )


def render_fact(fact: Fact):
    try:
        color = category_color(fact.category)
    except UnknownCategoryError:
        logger.warning("Fact %s has unknown category %r", fact.id, fact.category)
        st.error(f"Fact {fact.id} has an unknown category: {fact.category!r}")
        return
    st.markdown(
        f"""
        <div class="fact">
          <p>{html.escape(fact.text)}<a class="source" href="{html.escape(fact.source, quote=True)}"
             target="_blank" rel="noopener noreferrer">(Source)</a></p>
          <span class="tag" style="background-color:{color}">{html.escape(fact.category)}</span>
          <div class="vote-buttons">
            <span class="vote">👍 {fact.votes_interesting}</span>
            <span class="vote">🤯 {fact.votes_mindblowing}</span>
            <span class="vote">⛔️ {fact.votes_false}</span>
          </div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_fact_list(facts: List[Fact]):
    if not facts:
        st.info("No facts for this category yet. Create the first one!")
    for fact in facts:
        render_fact(fact)
    st.caption(facts_message(len(facts)))


def render_breakdown(facts: List[Fact]):
    breakdown = category_breakdown(facts_to_frame(facts))
    with st.expander("Facts by category", expanded=False):
        st.altair_chart(breakdown_chart(breakdown), use_container_width=True)
        st.download_button(
            "Export CSV",
            data=facts_to_frame(facts).to_csv(index=False).encode("utf-8"),
            file_name="facts.csv",
            mime="text/csv",
        )


# ---------- UI setup ----------
st.set_page_config(page_title=APP_TITLE, layout="wide")
inject_base_styles()

# Fetch once per session, before the first render of the list.
if STATE_KEY not in st.session_state:
    with st.spinner("Loading facts..."):
        loaded, load_error = try_load_facts(settings=settings)
    set_state(with_facts(AppState(), loaded))
    st.session_state["load_error"] = load_error
    reset_draft_inputs()

state = get_state()
render_header(state)
if state.show_form:
    render_new_fact_form()

if st.session_state.get("load_error"):
    st.warning("Facts could not be loaded from the database. Showing local facts only.")

with st.sidebar:
    render_category_filter(state)

visible_facts = filter_facts(state.facts, state.current_category)
render_fact_list(visible_facts)
render_breakdown(list(state.facts))
