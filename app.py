import json
import logging
import os
from typing import cast

import streamlit as st

from src.label_lib import (
    Crystal,
    DateCode,
    DecodeError,
    NoMatchError,
    StreamingGrammar,
    SubmissionStats,
    generate_parts_csv,
    init_registry,
    process_submission,
)

logging.basicConfig(level=os.environ.get("SILKSCREEN_LOG_LEVEL", "WARNING").upper())


@st.cache_resource
def get_cached_registry():
    """Compiles every grammar once per server process."""
    return init_registry()


st.set_page_config(page_title="Silkscreen Label Checker", page_icon="🔎")

registry = get_cached_registry()

st.title("🔎 Silkscreen Label Checker")
st.markdown("""
**Decode component labels as you type them.**

Pick the component family, transcribe the label exactly as printed, and see
what the decoder makes of it. Paste a whole submission below to check a board at once.
""")

if "rows" not in st.session_state:
    st.session_state.rows = None
if "stats" not in st.session_state:
    st.session_state.stats = None

st.divider()
st.subheader("1. Single Label")

family_names = registry.names()
c1, c2 = st.columns([3, 1])
family_name = c1.selectbox(
    "Component Family",
    family_names,
    index=family_names.index("sram_sop_28"),
    key="family",
)
hint_year = c2.number_input(
    "Hint Year",
    min_value=0,
    max_value=2100,
    value=0,
    key="hint_year",
    help="Full year of the board's CPU, used to resolve single-digit years. 0 = none.",
)
label = st.text_input(
    "Label",
    key="label_input",
    placeholder="e.g. LH5264N4T LSI LOGIC JAPAN D4 06 05 C",
)

family = registry.family(family_name)

if label:
    try:
        part = family.parse(label)
    except NoMatchError as e:
        st.error(f"❌ {e}")
        # Streaming grammars can tell whether the text so far is still plausible
        pending = [
            p.name
            for p in family.parsers
            if isinstance(p, StreamingGrammar) and p.accepts_prefix(label)
        ]
        if pending:
            st.caption("Still consistent with: " + ", ".join(pending))
    except DecodeError as e:
        st.error(f"⚠️ Grammar bug: {e}")
    else:
        date = DateCode.loose(hint_year or None, part.date_code)
        matches = family.matching_names(label)

        c1, c2, c3 = st.columns(3)
        c1.metric("Manufacturer", part.manufacturer.value if part.manufacturer else "?")
        if isinstance(part, Crystal):
            c2.metric("Frequency", part.format_frequency())
        else:
            c2.metric("Kind", part.kind)
        c3.metric("Date", date.calendar() or "?")

        st.success(f"✅ Decoded by {matches[0] if matches else family_name}")
        if len(matches) > 1:
            st.warning(f"⚠️ Ambiguous: also matched by {', '.join(matches[1:])}")
        if part.date_code is not None and date.year is None:
            st.info(f"Year printed as '{part.date_code.year}'. Set a hint year to resolve it.")

st.divider()
st.subheader("2. Submission")

raw_submission = st.text_area(
    "Submission JSON",
    height=200,
    key="submission_json",
    placeholder='{"code": "DMG-0042", "board": "DMG", "labels": {"cpu": "..."}}',
)

if st.button("Decode Submission", key="submission_submit", type="primary"):
    try:
        record = json.loads(raw_submission)
    except ValueError as e:
        st.error(f"Invalid JSON: {e}")
    else:
        if not isinstance(record, dict):
            st.error("Invalid JSON: expected an object")
        else:
            rows, stats = process_submission(record)
            st.session_state.rows = rows
            st.session_state.stats = stats
            st.toast("Decoded submission!", icon="🔎")

if st.session_state.stats is not None:
    rows = st.session_state.rows
    stats = cast(SubmissionStats, st.session_state.stats)

    # 1. Show Stats
    with st.container():
        c1, c2, c3 = st.columns(3)
        c1.metric("Labels Read", stats["labels_read"])
        c2.metric("Parts Decoded", stats["parts_decoded"])
        c3.metric("Hint Year", stats["hint_year"] or "-")

    for error in stats["errors"]:
        st.error(error)

    # Labels for manual review
    if stats["residuals"]:
        st.warning(f"⚠️ {len(stats['residuals'])} labels did not match any grammar:")
        with st.expander("Show unmatched labels"):
            for line in stats["residuals"]:
                st.code(line)
    elif rows:
        st.success("✅ Every label decoded.")

    # 2. Render
    if rows:
        st.dataframe(
            rows,
            column_order=["slot", "manufacturer", "kind", "frequency", "date", "label"],
        )

        st.download_button(
            "Download CSV",
            data=generate_parts_csv(rows),
            file_name="parts.csv",
            mime="text/csv",
            type="primary",
        )
