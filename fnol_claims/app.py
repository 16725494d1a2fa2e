"""
FNOL Claims Processing Agent: Dashboard.
Upload a document, pick a sample claim, or enter one by hand; see the extracted
fields, missing fields and routing decision.
"""

import html
import logging
import os
import sys
from pathlib import Path
from typing import Optional

_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st

from fnol_claims.documents import extract_text_from_bytes, extract_text_from_file
from fnol_claims.errors import UnsupportedInputError
from fnol_claims.output_format import (
    FORM_SECTIONS,
    ROUTE_CONFIG,
    build_standard_output,
    fields_from_form,
    get_field_value_for_form,
    to_json,
)
from fnol_claims.processor import process_claim, process_sample, process_text
from fnol_claims.router import FAST_TRACK_DAMAGE_THRESHOLD, FRAUD_KEYWORDS, effective_estimate, format_amount
from fnol_claims.samples import SAMPLE_LABELS
from fnol_claims.schema import ClaimOutput

logger = logging.getLogger(__name__)

SAMPLE_DOCUMENT = _project_root / "sample_fnol_full.txt"

# --- Session state keys ---
SK_SOURCE = "dashboard_source"
SK_RAW_TEXT = "dashboard_raw_text"
SK_OUTPUT = "dashboard_output"
SK_ERROR = "dashboard_error"
SK_LAST_UPLOAD = "dashboard_last_upload"


# --- Dashboard CSS ---
DASHBOARD_CSS = """
<style>
[data-testid="stAppViewContainer"] {
    background: linear-gradient(160deg, #0f172a 0%, #1e1b4b 45%, #0f172a 100%);
    background-attachment: fixed;
}
[data-testid="stHeader"] { background: rgba(15, 23, 42, 0.92); }
[data-testid="stSidebar"] {
    background: linear-gradient(180deg, #1e293b 0%, #0f172a 100%);
    border-right: 1px solid #334155;
}
.dash-header {
    display: flex; align-items: center; justify-content: space-between; flex-wrap: wrap;
    gap: 1rem; padding: 0.75rem 0 1.25rem 0; border-bottom: 1px solid #334155; margin-bottom: 1.5rem;
}
.dash-title-block h1 { font-size: 1.6rem; font-weight: 700; color: #f8fafc; margin: 0; }
.dash-title-block p { color: #94a3b8; font-size: 0.9rem; margin: 0.35rem 0 0 0; }
.dash-stat {
    background: rgba(30, 41, 59, 0.8); border: 1px solid #334155; border-radius: 10px;
    padding: 0.5rem 1rem; font-size: 0.85rem; color: #cbd5e1; margin-left: 0.5rem;
}
.dash-stat strong { color: #f8fafc; margin-right: 0.35rem; }
.kpi-row { display: flex; gap: 0.75rem; flex-wrap: wrap; margin: 1rem 0; }
.kpi-card {
    flex: 1; min-width: 140px; background: linear-gradient(145deg, #1e293b 0%, #0f172a 100%);
    border: 1px solid #334155; border-radius: 10px; padding: 0.9rem 1rem;
}
.kpi-card .label { font-size: 0.7rem; text-transform: uppercase; letter-spacing: 0.06em; color: #64748b; }
.kpi-card .val { font-size: 1rem; font-weight: 600; color: #f1f5f9; word-break: break-word; }
.styled-card {
    background: linear-gradient(145deg, #1e293b 0%, #0f172a 100%); border: 1px solid #334155;
    border-radius: 12px; padding: 1.25rem 1.5rem; margin: 0.75rem 0;
}
.styled-card h4 { color: #94a3b8; font-size: 0.75rem; text-transform: uppercase; margin: 0 0 0.5rem 0; }
.styled-card .value { font-size: 1.35rem; font-weight: 700; }
.form-section {
    background: linear-gradient(145deg, #1e293b 0%, #0f172a 100%); border: 1px solid #334155;
    border-radius: 12px; padding: 1rem 1.25rem; margin: 0.75rem 0;
}
.form-section h5 { color: #0ea5e9; font-size: 0.85rem; margin: 0 0 0.75rem 0; text-transform: uppercase; }
.form-row { display: flex; gap: 1rem; margin: 0.4rem 0; align-items: flex-start; }
.form-label { min-width: 160px; font-size: 0.8rem; color: #94a3b8; }
.form-value { flex: 1; font-size: 0.9rem; color: #f1f5f9; }
.form-value.missing { color: #64748b; font-style: italic; }
.missing-badge {
    background: #7f1d1d; color: #fecaca; padding: 0.2rem 0.5rem; border-radius: 6px;
    font-size: 0.75rem; margin: 0.25rem 0.25rem 0.25rem 0; display: inline-block;
}
.section-title { font-size: 0.8rem; text-transform: uppercase; letter-spacing: 0.08em; color: #94a3b8; margin: 1rem 0 0.5rem 0; }
</style>
"""


def _inject_css():
    st.markdown(DASHBOARD_CSS, unsafe_allow_html=True)


def _store_result(source: str, raw_text: Optional[str], output: Optional[ClaimOutput], error: Optional[str]):
    st.session_state[SK_SOURCE] = source
    st.session_state[SK_RAW_TEXT] = raw_text
    st.session_state[SK_OUTPUT] = output
    st.session_state[SK_ERROR] = error


def _run_text_pipeline(source: str, load_text):
    try:
        raw_text = load_text()
    except UnsupportedInputError as e:
        logger.warning("Could not load %s: %s", source, e)
        _store_result(source, None, None, str(e))
        return
    _store_result(source, raw_text, process_text(raw_text), None)


def _render_dashboard_header(output: Optional[ClaimOutput], source: Optional[str]):
    stats_html = ""
    if source:
        stats_html += f'<span class="dash-stat"><strong>Source</strong> {html.escape(source)}</span>'
    if output:
        label = ROUTE_CONFIG[output.recommended_route]["label"]
        stats_html += f'<span class="dash-stat"><strong>Route</strong> {label}</span>'
        stats_html += f'<span class="dash-stat"><strong>Missing</strong> {len(output.missing_fields)}</span>'
    if not stats_html:
        stats_html = '<span class="dash-stat">Upload a file, pick a sample, or enter a claim</span>'
    st.markdown(
        '<div class="dash-header">'
        '<div class="dash-title-block">'
        '<h1>📋 FNOL Claims Processing Agent</h1>'
        '<p>First Notice of Loss: Extract, Validate, Route</p>'
        '</div>'
        f'<div>{stats_html}</div>'
        '</div>',
        unsafe_allow_html=True,
    )


def _render_kpi_cards(output: ClaimOutput):
    doc = output.extracted_fields
    policy_num = doc.policy_info.policy_number or "—"
    holder = doc.policy_info.policyholder_name or "—"
    inc_date = doc.incident_info.date or "—"
    estimate = format_amount(effective_estimate(doc))
    claim_type = doc.claim_type or "—"
    cards = [
        ("Policy #", policy_num),
        ("Policyholder", holder),
        ("Incident date", inc_date),
        ("Est. damage", estimate),
        ("Claim type", claim_type),
    ]
    cards_html = "".join(
        f'<div class="kpi-card"><div class="label">{label}</div><div class="val">{html.escape(val)}</div></div>'
        for label, val in cards
    )
    st.markdown(f'<div class="kpi-row">{cards_html}</div>', unsafe_allow_html=True)


def _render_claim_form(output: ClaimOutput):
    missing = set(output.missing_fields)
    for section_title, rows in FORM_SECTIONS:
        rows_html = ""
        for label, path, _ in rows:
            val = get_field_value_for_form(output.extracted_fields, label)
            val_class = "form-value missing" if path in missing else "form-value"
            rows_html += (
                f'<div class="form-row"><span class="form-label">{label}</span>'
                f'<span class="{val_class}">{html.escape(val)}</span></div>'
            )
        st.markdown(
            f'<div class="form-section"><h5>{section_title}</h5>{rows_html}</div>',
            unsafe_allow_html=True,
        )
    if output.missing_fields:
        st.markdown("**Missing fields**")
        missing_html = "".join(f'<span class="missing-badge">{m}</span>' for m in output.missing_fields)
        st.markdown(f"<div>{missing_html}</div>", unsafe_allow_html=True)


def _render_decision(output: ClaimOutput):
    route = ROUTE_CONFIG[output.recommended_route]
    st.markdown(
        f'<div class="styled-card" style="border-left: 4px solid {route["color"]};">'
        f'<h4>Recommended route</h4>'
        f'<div class="value" style="color: {route["color"]};">{route["icon"]} {route["label"]}</div></div>',
        unsafe_allow_html=True,
    )
    st.markdown("**Reasoning**")
    st.info(output.reasoning)
    st.download_button(
        "Download standard output (JSON)",
        data=to_json(output),
        file_name="fnol_standard_output.json",
        mime="application/json",
        key="standard_dl",
    )


def _manual_entry_form():
    with st.form("manual_entry"):
        c1, c2 = st.columns(2)
        with c1:
            values = {
                "policy_number": st.text_input("Policy number"),
                "policyholder_name": st.text_input("Policyholder name"),
                "effective_date_start": st.text_input("Effective date start"),
                "effective_date_end": st.text_input("Effective date end"),
                "incident_date": st.text_input("Incident date"),
                "incident_time": st.text_input("Incident time"),
                "location": st.text_input("Location"),
                "description": st.text_area("Description"),
            }
        with c2:
            values.update({
                "claimant_name": st.text_input("Claimant name"),
                "claimant_contact": st.text_input("Claimant contact"),
                "third_party_name": st.text_input("Third party name"),
                "third_party_contact": st.text_input("Third party contact"),
                "asset_type": st.selectbox("Asset type", ["", "Vehicle", "Property", "Equipment", "N/A"]),
                "asset_id": st.text_input("Asset ID"),
                "estimated_damage": st.text_input("Estimated damage ($)"),
                "claim_type": st.text_input("Claim type"),
                "attachments": st.text_input("Attachments (comma separated)"),
                "initial_estimate": st.text_input("Initial estimate ($)"),
            })
        submitted = st.form_submit_button("Process claim")
    if submitted:
        try:
            fields = fields_from_form(values)
        except ValueError as e:
            st.error(str(e))
            return
        _store_result("Manual entry", None, process_claim(fields), None)


def run_app():
    st.set_page_config(
        page_title="FNOL Claims Agent",
        page_icon="📋",
        layout="wide",
        initial_sidebar_state="expanded",
    )
    _inject_css()

    for key in (SK_SOURCE, SK_RAW_TEXT, SK_OUTPUT, SK_ERROR, SK_LAST_UPLOAD):
        if key not in st.session_state:
            st.session_state[key] = None

    # Sidebar
    with st.sidebar:
        st.header("⚙️ Routing rules")
        st.caption(
            f"• Words: {', '.join(FRAUD_KEYWORDS)} → **Investigation**\n"
            "• Mandatory field missing → **Manual review**\n"
            "• Claim type injury / personal injury → **Specialist queue**\n"
            f"• Estimate < {format_amount(FAST_TRACK_DAMAGE_THRESHOLD)} → **Fast-track**\n"
            "• Otherwise → **Manual review**"
        )
        st.markdown("---")
        if st.session_state[SK_OUTPUT] or st.session_state[SK_ERROR]:
            if st.button("Clear session"):
                for key in (SK_SOURCE, SK_RAW_TEXT, SK_OUTPUT, SK_ERROR):
                    st.session_state[key] = None
                st.rerun()
        else:
            st.caption("No claim processed yet.")

    tab_upload, tab_samples, tab_manual = st.tabs(["📄 Upload document", "🗂️ Sample claims", "✍️ Manual entry"])
    with tab_upload:
        uploaded = st.file_uploader("Choose PDF or TXT", type=["pdf", "txt"], help="FNOL document to extract and route.")
        if uploaded and uploaded.name != st.session_state[SK_LAST_UPLOAD]:
            st.session_state[SK_LAST_UPLOAD] = uploaded.name
            with st.spinner("Running pipeline: Extract → Validate → Route…"):
                _run_text_pipeline(uploaded.name, lambda: extract_text_from_bytes(uploaded.getvalue(), uploaded.name))
        if st.button("Load sample document"):
            _run_text_pipeline(SAMPLE_DOCUMENT.name, lambda: extract_text_from_file(SAMPLE_DOCUMENT))
    with tab_samples:
        name = st.selectbox("Sample claim", list(SAMPLE_LABELS), format_func=SAMPLE_LABELS.get)
        if st.button("Process sample"):
            _store_result(SAMPLE_LABELS[name], None, process_sample(name), None)
    with tab_manual:
        _manual_entry_form()

    source = st.session_state[SK_SOURCE]
    raw_text = st.session_state[SK_RAW_TEXT]
    output: Optional[ClaimOutput] = st.session_state[SK_OUTPUT]
    err_msg = st.session_state[SK_ERROR]

    _render_dashboard_header(output, source)

    if err_msg:
        st.error(f"Extraction error: {err_msg}")
    if not output:
        return

    st.markdown('<p class="section-title">Claim summary</p>', unsafe_allow_html=True)
    _render_kpi_cards(output)

    col_form, col_decision = st.columns([3, 2])
    with col_form:
        st.markdown('<p class="section-title">Claim form</p>', unsafe_allow_html=True)
        _render_claim_form(output)
    with col_decision:
        st.markdown('<p class="section-title">Routing decision</p>', unsafe_allow_html=True)
        _render_decision(output)

    st.markdown('<p class="section-title">Data & export</p>', unsafe_allow_html=True)
    tab_raw, tab_json = st.tabs(["📄 Raw text", "📊 Structured JSON"])
    with tab_raw:
        st.text_area("Raw text", value=raw_text or "", height=300, disabled=True, label_visibility="collapsed")
    with tab_json:
        st.json(build_standard_output(output))


if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("FNOL_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    run_app()
