"""Year Clock: Streamlit page showing the dial, with a widget reload button."""

from dotenv import load_dotenv

load_dotenv()

import datetime  # noqa: E402

import streamlit as st  # noqa: E402
import streamlit.components.v1 as components  # noqa: E402

from yearclock.compute import run  # noqa: E402
from yearclock.config import ConfigError, DialConfig, load_config  # noqa: E402
from yearclock.models import DialData, DialQuery, Palette  # noqa: E402
from yearclock.renderers.svg import render_svg_html  # noqa: E402
from yearclock.timeline import TimelinePolicy, build_timeline, next_reload  # noqa: E402

_DIAL_SIZE = 320

st.set_page_config(
    page_title="Year Clock",
    page_icon="◔",
    layout="centered",
)

st.markdown(
    """
    <style>
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #1c1c1e !important;
        color: #e8e8e8;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    [data-testid="stButton"] button {
        background-color: rgba(255, 255, 255, 0.08) !important;
        color: #e8e8e8 !important;
        border: 1px solid rgba(255, 255, 255, 0.25) !important;
        border-radius: 6px !important;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


@st.cache_data(show_spinner=False, max_entries=32, ttl=datetime.timedelta(hours=1))
def _dial_for(when: datetime.datetime, config: DialConfig) -> DialData:
    return run(DialQuery(when=when), config)


# --- Configuration (env, overridable from the sidebar) ---
try:
    base_config = load_config()
except ConfigError as e:
    st.error(str(e))
    st.stop()

if "preview_date" not in st.session_state:
    st.session_state.preview_date = None

with st.sidebar:
    palette = st.radio(
        "Palette",
        options=[p.value for p in Palette],
        index=[p.value for p in Palette].index(base_config.palette.value),
        horizontal=True,
    )
    show_progress = st.toggle("Show year progress", value=base_config.show_progress)
    use_preview = st.toggle("Preview a date", value=False)
    if use_preview:
        st.session_state.preview_date = st.date_input(
            "Date", value=datetime.datetime.now(base_config.tz).date()
        )
    else:
        st.session_state.preview_date = None
    policy = st.radio(
        "Timeline",
        options=[p.value for p in TimelinePolicy],
        horizontal=True,
    )

config = base_config.model_copy(
    update={"palette": Palette(palette), "show_progress": show_progress}
)

now = datetime.datetime.now(config.tz).replace(second=0, microsecond=0)
if st.session_state.preview_date is not None:
    d = st.session_state.preview_date
    when = datetime.datetime(d.year, d.month, d.day)
else:
    when = now

# --- Dial ---
dial = _dial_for(when, config)
components.html(
    render_svg_html(dial, size=_DIAL_SIZE), height=_DIAL_SIZE + 24, scrolling=False
)
st.caption(
    f"{dial.when.strftime('%Y-%m-%d %H:%M %Z')} · "
    f"{dial.slices[dial.month_index].label} · "
    f"year {dial.progress:.1%}"
)

# --- Refresh trigger ---
if st.button("Reload widget", key="reload_btn", use_container_width=True):
    _dial_for.clear()
    st.rerun()

# --- Upcoming timeline ---
entries = build_timeline(now, config, TimelinePolicy(policy))
with st.expander("Timeline"):
    st.table(
        [
            {
                "when": e.when.strftime("%Y-%m-%d %H:%M"),
                "month": e.dial.slices[e.dial.month_index].label,
                "pointer °": round(e.dial.pointer_deg, 1),
                "year %": round(e.dial.progress * 100, 1),
            }
            for e in entries
        ]
    )
    reload_at = next_reload(entries)
    if reload_at is not None:
        st.caption(f"Next reload: {reload_at.strftime('%Y-%m-%d %H:%M')}")
