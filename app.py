"""
Streamlit App for the Daily Report Generator
Compose, save, export and e-mail daily work reports
"""

import uuid
import logging
import streamlit as st

from daily_report import config
from daily_report.activities import build_activity_time, clean_activities, split_activity_time
from daily_report.composer import compose_report
from daily_report.date_utils import format_for_display, today_iso
from daily_report.exporters import export_report
from daily_report.notifications import send_report_email
from daily_report.storage import (
    ReportNotFoundError,
    delete_report,
    get_report,
    get_report_preview,
    list_reports,
    save_report,
)

logger = logging.getLogger(__name__)

NEW_REPORT_VIEW = "New Report"
HISTORY_VIEW = "History"


# ============================================================================
# Session helpers
# ============================================================================

def add_activity_row(time_value: str = "", description: str = ""):
    row_id = str(uuid.uuid4())
    raw_time, period = split_activity_time(time_value)
    st.session_state[f"time_{row_id}"] = raw_time
    st.session_state[f"period_{row_id}"] = period
    st.session_state[f"desc_{row_id}"] = description
    st.session_state.activity_rows.append(row_id)


def remove_activity_row(row_id: str):
    if len(st.session_state.activity_rows) > 1:
        st.session_state.activity_rows.remove(row_id)


def reset_form():
    st.session_state.activity_rows = []
    st.session_state.report_id = ""
    st.session_state.report_text = ""
    st.session_state.report_date = format_for_display(today_iso())
    add_activity_row()


def keep_form_state():
    # Streamlit forgets widget values on runs where the widget is not drawn
    st.session_state.setdefault("report_id", "")
    st.session_state.setdefault("report_text", "")
    st.session_state.setdefault("report_date", format_for_display(today_iso()))
    st.session_state.report_text = st.session_state.report_text
    st.session_state.report_date = st.session_state.report_date
    for row_id in st.session_state.activity_rows:
        for prefix, default in (("time_", ""), ("period_", "AM"), ("desc_", "")):
            key = f"{prefix}{row_id}"
            st.session_state[key] = st.session_state.get(key, default)


def load_report_for_edit(report_id: str):
    report = get_report(report_id)
    if report is None:
        st.session_state.flash_error = "Report not found"
        return
    st.session_state.activity_rows = []
    for activity in report.activities:
        add_activity_row(activity.time, activity.description)
    if not st.session_state.activity_rows:
        add_activity_row()
    st.session_state.report_id = report.id
    st.session_state.report_date = format_for_display(report.report_date)
    st.session_state.report_text = report.full_report
    st.session_state.view = NEW_REPORT_VIEW


def collect_activities():
    activities = []
    for row_id in st.session_state.activity_rows:
        activities.append({
            "time": build_activity_time(
                st.session_state.get(f"time_{row_id}", ""),
                st.session_state.get(f"period_{row_id}", "AM"),
            ),
            "description": st.session_state.get(f"desc_{row_id}", ""),
        })
    return clean_activities(activities)


def render_downloads(report, key_prefix: str):
    col1, col2 = st.columns(2)
    for column, export_format, label in ((col1, "docx", "📄 Word"), (col2, "pdf", "📕 PDF")):
        with column:
            try:
                data, filename, mime = export_report(report, export_format)
                st.download_button(
                    label=label,
                    data=data,
                    file_name=filename,
                    mime=mime,
                    key=f"{key_prefix}_{export_format}",
                )
            except Exception as e:
                logger.error(f"Export to {export_format} failed for {report.id}: {e}")
                st.error(f"{export_format.upper()} export error")


# ============================================================================
# Views
# ============================================================================

def new_report_view():
    if st.session_state.report_id:
        st.info("Editing a saved report. Saving will update it.")
        st.button("Exit edit mode", on_click=reset_form)

    st.text_input("Date", key="report_date", placeholder="February 16, 2026")

    st.subheader("Activities")
    for row_id in list(st.session_state.activity_rows):
        col_time, col_period, col_desc, col_remove = st.columns([2, 1, 6, 1])
        with col_time:
            st.text_input("Time", key=f"time_{row_id}", placeholder="930", label_visibility="collapsed")
        with col_period:
            st.selectbox("Period", ["AM", "PM"], key=f"period_{row_id}", label_visibility="collapsed")
        with col_desc:
            st.text_input("Description", key=f"desc_{row_id}", placeholder="Activity description",
                          label_visibility="collapsed")
        with col_remove:
            st.button("✕", key=f"remove_{row_id}", on_click=remove_activity_row, args=(row_id,))

    st.button("+ Add Activity", on_click=add_activity_row)

    if st.button("Generate Report", type="primary"):
        with st.spinner("Generating report..."):
            try:
                st.session_state.report_text = compose_report(st.session_state.report_date, collect_activities())
            except ValueError as e:
                st.error(str(e))
            except Exception as e:
                logger.error(f"Error generating report: {e}")
                st.error("Failed to generate report. Please try again.")

    if not st.session_state.report_text:
        return

    st.divider()
    st.text_area("Report", key="report_text", height=360)

    if st.button("💾 Update Report" if st.session_state.report_id else "💾 Save Report"):
        try:
            st.session_state.report_id = save_report(
                st.session_state.report_date,
                collect_activities(),
                st.session_state.report_text,
                report_id=st.session_state.report_id or None,
            )
            st.success("✅ Report saved to history!")
        except (ValueError, ReportNotFoundError) as e:
            st.error(str(e))

    if st.session_state.report_id:
        report = get_report(st.session_state.report_id)
        if report:
            st.markdown("### 📥 Download Options")
            render_downloads(report, "current")


def history_view():
    reports = list_reports()
    if not reports:
        st.info("No saved reports yet.")
        return

    for report in reports:
        with st.expander(f"{format_for_display(report.report_date)}"):
            st.caption(get_report_preview(report.full_report))
            render_downloads(report, report.id)

            col_edit, col_delete = st.columns(2)
            with col_edit:
                st.button("✏️ Edit", key=f"edit_{report.id}", on_click=load_report_for_edit, args=(report.id,))
            with col_delete:
                if st.button("🗑️ Delete", key=f"delete_{report.id}"):
                    delete_report(report.id)
                    st.rerun()

            with st.form(key=f"email_{report.id}"):
                email = st.text_input("Send to")
                message = st.text_area("Message (optional)")
                if st.form_submit_button("📧 Send"):
                    try:
                        send_report_email(report, email, message)
                        st.success("Email sent successfully (demo mode - check server log)")
                    except ValueError as e:
                        st.error(str(e))


# ============================================================================
# Main
# ============================================================================

st.set_page_config(page_title="Daily Report Generator", page_icon="📝")
st.title("📝 Daily Report Generator")

if "activity_rows" not in st.session_state:
    reset_form()
else:
    keep_form_state()

if "view" not in st.session_state:
    st.session_state.view = NEW_REPORT_VIEW

st.sidebar.radio("View", [NEW_REPORT_VIEW, HISTORY_VIEW], key="view")
st.sidebar.caption(f"Reports database: {config.REPORTS_DB_FILE}")

if st.session_state.get("flash_error"):
    st.error(st.session_state.pop("flash_error"))

if st.session_state.view == NEW_REPORT_VIEW:
    new_report_view()
else:
    history_view()
