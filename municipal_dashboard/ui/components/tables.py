"""
Reusable helpers for rendering record tables with consistent configuration.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd
import streamlit as st

from municipal_dashboard.config import DEFAULT_TIMEZONE
from municipal_dashboard.ui.components.formatting import (
    format_date,
    format_datetime,
    format_number,
    format_roles,
    label,
)


def add_link_columns(df: pd.DataFrame, base_path: str, resource: str) -> pd.DataFrame:
    """Append view/edit URLs (``{base}/{resource}/{id}`` and ``.../edit``)."""
    linked = df.copy()
    if "id" not in linked:
        return linked
    linked["view_url"] = linked["id"].map(lambda record_id: f"{base_path}/{resource}/{record_id}")
    linked["edit_url"] = linked["view_url"] + "/edit"
    return linked


def format_columns(
    df: pd.DataFrame,
    column_config: Dict[str, Dict[str, Any]],
    timezone: str = DEFAULT_TIMEZONE,
) -> pd.DataFrame:
    formatted_df = df.copy()
    for column, config in column_config.items():
        if column not in formatted_df.columns:
            continue
        fmt_type = config.get("type")
        if fmt_type == "label":
            labels = config.get("labels", {})
            formatted_df[column] = formatted_df[column].apply(lambda v: label(v, labels))
        elif fmt_type == "date":
            missing = config.get("missing", "–")
            formatted_df[column] = formatted_df[column].apply(
                lambda v: format_date(v, missing=missing, timezone=timezone)
            )
        elif fmt_type == "datetime":
            missing = config.get("missing", "–")
            formatted_df[column] = formatted_df[column].apply(
                lambda v: format_datetime(v, missing=missing, timezone=timezone)
            )
        elif fmt_type == "roles":
            formatted_df[column] = formatted_df[column].apply(format_roles)
        elif fmt_type == "set":
            formatted_df[column] = formatted_df[column].apply(lambda v: ", ".join(sorted(v)) if v else "–")
        elif fmt_type == "number":
            decimals = int(config.get("decimals", 0))
            formatted_df[column] = formatted_df[column].apply(
                lambda v: format_number(None if pd.isna(v) else v, decimals=decimals)
            )
    return formatted_df


def render_table(
    df: pd.DataFrame,
    columns: List[str],
    headers: Dict[str, str],
    column_config: Optional[Dict[str, Dict[str, Any]]] = None,
    height: int = 400,
    export_file_name: str = "export.csv",
    timezone: str = DEFAULT_TIMEZONE,
) -> None:
    if df.empty:
        st.info("Keine Einträge für die aktuelle Auswahl gefunden.")
        return

    formatted_df = format_columns(df, column_config or {}, timezone)
    visible = [col for col in columns if col in formatted_df.columns]
    display_df = formatted_df[visible]

    streamlit_config = {}
    for column in visible:
        header = headers.get(column, column)
        if column == "view_url":
            streamlit_config[column] = st.column_config.LinkColumn(header, display_text="Ansehen")
        elif column == "edit_url":
            streamlit_config[column] = st.column_config.LinkColumn(header, display_text="Bearbeiten")
        elif pd.api.types.is_numeric_dtype(display_df[column]):
            streamlit_config[column] = st.column_config.NumberColumn(header, format="%d")
        else:
            streamlit_config[column] = st.column_config.TextColumn(header)

    st.dataframe(
        display_df,
        use_container_width=True,
        height=height,
        hide_index=True,
        column_config=streamlit_config,
    )

    csv_bytes = display_df.to_csv(index=False).encode("utf-8")
    st.download_button(
        "CSV herunterladen",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
    )
