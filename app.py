"""
GUDID Chronicles — Medical Device Supply-Chain Explorer

Load packing-list CSVs, filter by supplier / device / date, chart delivery
volumes, explore supplier → device → customer relationships as a network,
and chat with configurable agent personas about the filtered data.
"""

import sys
from pathlib import Path
# Ensure repo root is in path for gudid_utils import
sys.path.insert(0, str(Path(__file__).parent))

import logging
from datetime import datetime

import requests
import streamlit as st
import streamlit.components.v1 as components

from gudid_utils.agents import (
    DEFAULT_AGENTS_YAML,
    AgentConfigError,
    find_agent,
    parse_agents_yaml,
)
from gudid_utils.aggregation import aggregate
from gudid_utils.charts import time_series_figure, top_devices_figure
from gudid_utils.chat import (
    ChatServiceError,
    build_data_context,
    build_prompt,
    generate_response,
    get_api_key,
)
from gudid_utils.config import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_MODEL,
    GRAPH_HEIGHT_PX,
    GRAPH_RECORD_CAP,
    MODEL_OPTIONS,
    PREVIEW_ROW_LIMIT,
)
from gudid_utils.filters import FilterCriteria, filter_options, filter_records
from gudid_utils.graph_render import to_pyvis
from gudid_utils.records import (
    decode_upload,
    load_sample_records,
    parse_records,
    records_to_frame,
)
from gudid_utils.relationship_graph import build_graph
from gudid_utils.themes import STYLE_NAMES, get_style, resolve_colors, spin_jackpot
from gudid_utils.translations import LANGUAGES, get_text
from gudid_utils.usage_log import log_event

logger = logging.getLogger(__name__)


# ============================================================================
# SESSION STATE
# ============================================================================

def init_session_state():
    """Seed session state on first run (sample data + default agents)."""
    if "records" not in st.session_state:
        st.session_state.records = load_sample_records()
        st.session_state.events = log_event([], "Data Load", "Loaded Sample Data")
    st.session_state.setdefault("events", [])
    st.session_state.setdefault("theme_name", STYLE_NAMES[0])
    st.session_state.setdefault("dark_mode", False)
    st.session_state.setdefault("lang", "en")
    st.session_state.setdefault("model", DEFAULT_MODEL)
    st.session_state.setdefault("chat_messages", [])
    st.session_state.setdefault("last_upload", None)
    st.session_state.setdefault("agents_error", "")
    if "agents_yaml" not in st.session_state:
        st.session_state.agents_yaml = DEFAULT_AGENTS_YAML
        st.session_state.agents_yaml_editor = DEFAULT_AGENTS_YAML
        st.session_state.agents = parse_agents_yaml(DEFAULT_AGENTS_YAML)
        st.session_state.selected_agent_id = st.session_state.agents[0].id


def record_event(event: str, details: str):
    st.session_state.events = log_event(st.session_state.events, event, details)


# Callbacks below may write widget-bound keys
# (theme_name, selected_agent_id, agents_yaml_editor).

def apply_agents_yaml(text: str, event_details: str) -> bool:
    """Parse and install new agent YAML; keeps the previous agents on error."""
    try:
        agents = parse_agents_yaml(text)
    except AgentConfigError as e:
        logger.warning(f"Rejected agents YAML: {e}")
        st.session_state.agents_error = str(e)
        return False
    st.session_state.agents_error = ""
    st.session_state.agents_yaml = text
    st.session_state.agents_yaml_editor = text
    st.session_state.agents = agents
    if agents and not any(a.id == st.session_state.selected_agent_id for a in agents):
        st.session_state.selected_agent_id = agents[0].id
    record_event("Agent Config", event_details)
    return True


def on_save_agents():
    apply_agents_yaml(st.session_state.agents_yaml_editor, "Edited agents.yaml")


def on_apply_agents_upload():
    uploaded = st.session_state.get("agents_upload")
    if uploaded is not None:
        apply_agents_yaml(decode_upload(uploaded.getvalue()), "Uploaded new agents.yaml")


def on_spin_jackpot():
    style = spin_jackpot()
    st.session_state.theme_name = style["name"]
    record_event("Theme Change", f"Spun to {style['name']}")


# ============================================================================
# THEME
# ============================================================================

def inject_theme_css(colors):
    st.markdown(
        f"""
        <style>
        :root {{
            --painter-primary: {colors['primary']};
            --painter-secondary: {colors['secondary']};
            --painter-accent: {colors['accent']};
            --painter-bg: {colors['bg']};
            --painter-text: {colors['text']};
            --painter-card: {colors['card']};
        }}
        .stApp {{ background-color: var(--painter-bg); color: var(--painter-text); }}
        h1, h2, h3 {{ color: var(--painter-primary); }}
        div[data-testid="stMetric"] {{
            background-color: var(--painter-card);
            border: 1px solid {colors['primary']}33;
            border-radius: 8px;
            padding: 8px 12px;
        }}
        </style>
        """,
        unsafe_allow_html=True,
    )


# ============================================================================
# SIDEBAR
# ============================================================================

def render_sidebar(t):
    with st.sidebar:
        st.header(f"📦 {t['title']}")
        st.caption(f"v{APP_VERSION}")

        uploaded = st.file_uploader(t["upload"], type=["csv", "txt"])
        if uploaded is not None and uploaded.file_id != st.session_state.last_upload:
            text = decode_upload(uploaded.getvalue())
            st.session_state.records = parse_records(text)
            st.session_state.last_upload = uploaded.file_id
            record_event("Data Upload",
                         f"Uploaded {uploaded.name}, {len(st.session_state.records)} rows")

        if st.button(t["load_sample"], use_container_width=True):
            st.session_state.records = load_sample_records()
            record_event("Data Load", "Loaded Sample Data")

        st.markdown("---")
        st.subheader(f"🎨 {t['theme']}")
        st.selectbox(t["theme"], STYLE_NAMES, key="theme_name", label_visibility="collapsed")
        st.button(f"🎰 {t['jackpot']}", use_container_width=True, on_click=on_spin_jackpot)
        st.toggle(t["dark_mode"], key="dark_mode")
        st.selectbox(t["language"], list(LANGUAGES.keys()),
                     format_func=lambda code: LANGUAGES[code], key="lang")

        st.markdown("---")
        with st.expander(f"🧾 {t['usage_log']}"):
            if not st.session_state.events:
                st.caption("—")
            for ev in st.session_state.events[:20]:
                st.markdown(f"`{ev.display_time()}` **{ev.event}**: {ev.details}")


# ============================================================================
# ANALYTICS TAB
# ============================================================================

def render_filters(t, records) -> FilterCriteria:
    suppliers, devices = filter_options(records)
    all_label = t["all"]

    st.subheader(f"🔎 {t['filters']}")
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        supplier = st.selectbox(t["supplier"], [""] + suppliers,
                                format_func=lambda v: v or all_label)
    with c2:
        device = st.selectbox(t["device"], [""] + devices,
                              format_func=lambda v: v or all_label)
    with c3:
        start_date = st.date_input(t["start_date"], value=None)
    with c4:
        end_date = st.date_input(t["end_date"], value=None)

    return FilterCriteria(supplier=supplier, device=device,
                          start_date=start_date, end_date=end_date)


def render_analytics(t, colors, records, filtered, analytics):
    st.caption(f"{len(filtered)} / {len(records)} records • {st.session_state.theme_name} Style")

    m1, m2, m3, m4 = st.columns(4)
    m1.metric(t["total_lines"], f"{analytics.total_lines:,}")
    m2.metric(t["total_units"], f"{analytics.total_units:,}")
    m3.metric(t["unique_suppliers"], analytics.unique_suppliers)
    m4.metric(t["unique_customers"], analytics.unique_customers)

    with st.expander(f"📋 {t['preview']}"):
        preview_df = records_to_frame(filtered)
        st.caption(f"Showing first {PREVIEW_ROW_LIMIT} filtered rows")
        st.dataframe(preview_df.head(PREVIEW_ROW_LIMIT), use_container_width=True, hide_index=True)
        st.download_button(
            "Download filtered.csv",
            data=preview_df.to_csv(index=False).encode("utf-8"),
            file_name="filtered.csv",
            mime="text/csv",
        )

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(time_series_figure(analytics, colors, title=t["time_series"]),
                        use_container_width=True)
    with col2:
        st.plotly_chart(top_devices_figure(analytics, colors, title=t["top_devices"]),
                        use_container_width=True)

    st.subheader(f"🕸️ {t['graph']}")
    if not filtered:
        st.info(t["no_data"])
        return
    model = build_graph(filtered)
    st.caption(f"{len(model.nodes)} nodes • {len(model.links)} links "
               f"(first {min(len(filtered), GRAPH_RECORD_CAP)} filtered records)")
    net = to_pyvis(model, colors, height=GRAPH_HEIGHT_PX)
    components.html(net.generate_html(), height=GRAPH_HEIGHT_PX + 30, scrolling=False)


# ============================================================================
# AGENT TABS
# ============================================================================

def render_chat(t, criteria, filtered, analytics):
    agents = st.session_state.agents
    if not agents:
        st.warning("No agents defined. Add some in Agent HQ.")
        return

    left, right = st.columns([0.3, 0.7], gap="large")
    with left:
        st.radio(
            "Agent",
            [a.id for a in agents],
            format_func=lambda aid: find_agent(agents, aid).name,
            key="selected_agent_id",
        )
        agent = find_agent(agents, st.session_state.selected_agent_id)
        st.caption(agent.description)
        if agent.capabilities:
            st.markdown(" ".join(f"`{c}`" for c in agent.capabilities))
        st.selectbox("Model", MODEL_OPTIONS, key="model")
        st.caption(f"Context aware of filtered dataset ({len(filtered)} rows)")

    with right:
        for msg in st.session_state.chat_messages:
            with st.chat_message("user" if msg["role"] == "user" else "assistant"):
                st.markdown(msg["text"])
                if msg.get("model_used"):
                    st.caption(f"{msg['agent_id']} · {msg['model_used']}")

        api_key = get_api_key(st.secrets)
        if not api_key:
            st.warning(
                "No Gemini API key found.\n\n"
                "• Add [gemini] api_key to Streamlit Secrets, or\n"
                "• Set the GEMINI_API_KEY environment variable"
            )

        query = st.chat_input(t["chat_placeholder"], disabled=not api_key)
        if query and query.strip():
            st.session_state.chat_messages.append(
                {"role": "user", "text": query, "timestamp": datetime.now().timestamp()}
            )
            prompt = build_prompt(agent, build_data_context(analytics, criteria), query)
            model = st.session_state.model
            try:
                with st.spinner("Thinking..."):
                    reply = generate_response(prompt, model, api_key)
            except (requests.RequestException, ChatServiceError) as e:
                logger.warning(f"Chat request failed: {e}")
                reply = f"⚠️ Request failed: {e}"
            st.session_state.chat_messages.append({
                "role": "model",
                "text": reply,
                "timestamp": datetime.now().timestamp(),
                "agent_id": agent.id,
                "model_used": model,
            })
            record_event("Agent Chat", f"Used {agent.name} with {model}")
            st.rerun()


def render_agent_hq():
    st.markdown("Upload your own `agents.yaml` or edit the definitions below.")

    uploaded = st.file_uploader("Upload agents.yaml", type=["yaml", "yml"], key="agents_upload")
    if uploaded is not None:
        st.button("Apply uploaded file", on_click=on_apply_agents_upload)

    if st.session_state.agents_error:
        st.error(f"Failed to parse agents YAML: {st.session_state.agents_error}")
    else:
        st.caption(f"{len(st.session_state.agents)} agent(s) loaded")

    st.markdown("#### Edit agents.yaml")
    st.text_area("agents.yaml", key="agents_yaml_editor",
                 height=400, label_visibility="collapsed")
    c1, c2 = st.columns(2)
    with c1:
        st.button("Save changes", use_container_width=True, on_click=on_save_agents)
    with c2:
        st.download_button(
            "Download agents.yaml",
            data=st.session_state.agents_yaml.encode("utf-8"),
            file_name="agents.yaml",
            mime="text/yaml",
            use_container_width=True,
        )


def render_guide():
    st.markdown(
        f"""
**{APP_NAME}** allows for deep inspection of medical device supply chains.
Use the Analytics tab for visual insights and the Agent Chat tab to converse
with specialized AI agents.

- **Filters**: narrow the dataset by Supplier, Device, and Date Range. Filters apply to
  all charts, the graph, and the agent context.
- **Network**: shows the first {GRAPH_RECORD_CAP} filtered records as supplier → device → customer links.
  Drag nodes to rearrange them.
- **Agent HQ**: upload your own `agents.yaml` or edit the existing one live to define
  system prompts, capabilities, and preferred models.

Expected columns: `Suppliername`, `deliverdate`, `customer`, `DeviceName`, `Numbers`, `ModelNum`.
"""
    )


# ============================================================================
# STREAMLIT UI
# ============================================================================

def main():
    st.set_page_config(page_title=APP_NAME, page_icon="📦", layout="wide")
    init_session_state()

    t = get_text(st.session_state.lang)
    colors = resolve_colors(get_style(st.session_state.theme_name), st.session_state.dark_mode)
    inject_theme_css(colors)
    render_sidebar(t)

    st.title(f"📦 {t['title']}")
    st.markdown(f"*{t['subtitle']}*")

    records = st.session_state.records
    tab_analytics, tab_chat, tab_hq, tab_guide = st.tabs(
        [t["analytics"], t["agents"], t["agent_hq"], t["guide"]]
    )

    with tab_analytics:
        criteria = render_filters(t, records)

    filtered = filter_records(records, criteria)
    analytics = aggregate(filtered)

    with tab_analytics:
        render_analytics(t, colors, records, filtered, analytics)
    with tab_chat:
        render_chat(t, criteria, filtered, analytics)
    with tab_hq:
        render_agent_hq()
    with tab_guide:
        render_guide()


if __name__ == "__main__":
    main()
