"""Flight schedule parser Streamlit app.

Upload a schedule CSV export, get back the deduplicated, date-sorted flight
list. Also starts the keep-alive pinger once per server process.
"""

from __future__ import annotations

import calendar as pycal
import logging
from collections import Counter
from datetime import date
from typing import List, Tuple

import pandas as pd
import streamlit as st

import config
from datatypes import ParseOptions
from errors import ScheduleParseError
from keep_alive import KeepAlive
from logging_setup import configure_logging
from report_builder import split_report
from schedule_parser import parse_schedule

logger = logging.getLogger(__name__)

MONTH_ABBRS = [pycal.month_abbr[m].upper() for m in range(1, 13)]


# -------- Helper functions for Streamlit UI --------

@st.cache_resource
def _start_keep_alive() -> KeepAlive:
    """One pinger per server process, shared by all sessions."""
    pinger = KeepAlive()
    pinger.start()
    return pinger


def _per_date_counts(entries: List[Tuple[str, str]]) -> pd.DataFrame:
    """Flights per date line, in report order."""
    counts = Counter(d for d, _ in entries)
    ordered = list(dict.fromkeys(d for d, _ in entries))
    return pd.DataFrame([(d, counts[d]) for d in ordered], columns=["Date", "Flights"])


def _parse_settings() -> ParseOptions:
    with st.expander("Parse settings", expanded=False):
        col1, col2, col3 = st.columns(3)
        default_month = config.SCHEDULE_MONTH if config.SCHEDULE_MONTH in MONTH_ABBRS else "DEC"
        with col1:
            month = st.selectbox("Month", options=MONTH_ABBRS, index=MONTH_ABBRS.index(default_month))
        with col2:
            year = st.number_input("Year", min_value=2000, max_value=2100, value=date.today().year, step=1)
        with col3:
            prefix = st.text_input("Service code prefix", value=config.SERVICE_CODE_PREFIX)
    return ParseOptions(month=month, year=int(year), service_prefix=prefix)


# -------- Main Streamlit app --------

def main() -> None:
    st.set_page_config(page_title="Flight schedule parser", layout="wide")
    configure_logging()
    _start_keep_alive()

    st.title("Flight schedule parser")
    st.caption("Upload the schedule CSV export to get the flight list by date.")

    options = _parse_settings()
    uploaded = st.file_uploader("Schedule CSV", type=["csv"], accept_multiple_files=False)
    if uploaded is None:
        return

    try:
        report = parse_schedule(uploaded.getvalue(), options)
    except ScheduleParseError as e:
        logger.warning("Parse failed for %s: %s", uploaded.name, e)
        st.error(f"Error: {e}")
        return

    if not report:
        st.info("No flights found in the file.")
        return

    entries = split_report(report)
    df = _per_date_counts(entries)

    col1, col2 = st.columns(2)
    col1.metric("Flights", f"{len(entries)}")
    col2.metric("Dates", f"{len(df)}")

    st.subheader("Flights")
    st.text_area("Result", value=report, height=400)
    st.download_button(
        label="Download",
        data=report.encode("utf-8"),
        file_name="flight_schedule.txt",
        mime="text/plain",
    )

    st.subheader("Flights per date")
    st.bar_chart(df.set_index("Date"))

    st.markdown("---")
    st.caption("Uploaded files are parsed in memory and never stored.")


if __name__ == "__main__":
    main()
