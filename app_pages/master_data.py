"""
Master Data Page Module
=======================
Motor, geography and business masters for the back-office console
"""

from datetime import date

import pandas as pd
import streamlit as st
from dotenv import load_dotenv

from core import business_master, master_data, reference_data

# Load environment variables
load_dotenv()

# Which widget edits each master column
NUMBER_FIELDS = {"ncb_slab_from", "ncb_slab_to", "depreciation_from", "depreciation_to"}
RATE_FIELDS = {"ncb_slab_rate", "depreciation_rate"}
DATE_FIELDS = {"active_from_date", "active_to_date"}
LOOKUP_FIELDS = {
    "motor_segment_id": ("Motor Segment", reference_data.MOTOR_SEGMENTS),
    "country_id": ("Country", reference_data.COUNTRIES),
    "city_id": ("City", reference_data.CITIES),
}
# Names derived from a lookup on save
DERIVED_FIELDS = {"motor_segment_name", "country_name", "city_name", "state_id", "state_name"}


def _to_date(value):
    if not value:
        return None
    return date.fromisoformat(str(value)[:10])


def _field_input(column: str, current, key: str):
    label = column.replace("_", " ").title()
    if column in LOOKUP_FIELDS:
        lookup_label, items = LOOKUP_FIELDS[column]
        options = [item["id"] for item in items]
        names = {item["id"]: item["name"] for item in items}
        index = options.index(current) if current in options else 0
        return st.selectbox(f"{lookup_label} *", options, index=index,
                            format_func=lambda x: names[x], key=key)
    if column in NUMBER_FIELDS:
        return st.number_input(f"{label} *", min_value=0, step=1,
                               value=int(current or 0), key=key)
    if column in RATE_FIELDS:
        return st.number_input(f"{label} (%) *", min_value=0.0, max_value=100.0, step=0.5,
                               value=float(current or 0), key=key)
    if column in DATE_FIELDS:
        required = column == "active_from_date"
        value = st.date_input(f"{label}{' *' if required else ''}",
                              value=_to_date(current) or (date.today() if required else None),
                              key=key)
        return value.isoformat() if value else None
    return st.text_input(label, value=current or "", key=key)


def render_entry_form(table: str, entry: dict = None):
    """Create or edit one master entry"""
    config = master_data.get_table_config(table)
    is_edit = entry is not None
    form_key = f"{table}_form_{entry['id'] if is_edit else 'new'}"

    with st.form(form_key):
        st.subheader(f"{'Edit' if is_edit else 'Add'} {config['label']}")
        values = {}
        editable = [c for c in config["columns"] if c not in DERIVED_FIELDS]
        col1, col2 = st.columns(2)
        for i, column in enumerate(editable):
            with (col1 if i % 2 == 0 else col2):
                values[column] = _field_input(
                    column, entry.get(column) if is_edit else None, f"{form_key}_{column}"
                )
        values["is_active"] = st.checkbox(
            "Active", value=entry.get("is_active", True) if is_edit else True, key=f"{form_key}_active"
        )

        submitted = st.form_submit_button(f"{'Update' if is_edit else 'Create'} {config['label']}")

    if submitted:
        try:
            if is_edit:
                master_data.update_entry(table, entry["id"], values)
                st.success(f"{config['label']} updated successfully!")
            else:
                master_data.create_entry(table, values)
                st.success(f"{config['label']} created successfully!")
            st.rerun()
        except ValueError as e:
            st.error(str(e))


def render_master_table(table: str):
    """Search, filter and page through one master table"""
    config = master_data.get_table_config(table)
    summary = master_data.get_summary(table)

    col1, col2, col3 = st.columns(3)
    col1.metric("Total", summary["total"])
    col2.metric("Active", summary["active"])
    col3.metric("Inactive", summary["inactive"])

    col1, col2 = st.columns([3, 1])
    with col1:
        search = st.text_input("Search", key=f"{table}_search", placeholder=f"Search {config['label']}...")
    with col2:
        status = st.selectbox("Status", master_data.STATUS_OPTIONS, key=f"{table}_status")

    filters = {}
    if config["filters"]:
        filter_cols = st.columns(len(config["filters"]))
        for column, filter_col in zip(config["filters"], filter_cols):
            items = {
                "motor_segment_id": reference_data.MOTOR_SEGMENTS,
                "country_id": reference_data.COUNTRIES,
                "city_id": reference_data.CITIES,
                "state_id": [{"id": c["state_id"], "name": c["state_name"]} for c in reference_data.CITIES],
            }[column]
            names = {"ALL": "All", **{item["id"]: item["name"] for item in items}}
            with filter_col:
                filters[column] = st.selectbox(
                    column.replace("_id", "").replace("_", " ").title(),
                    list(names.keys()),
                    format_func=lambda x, names=names: names[x],
                    key=f"{table}_filter_{column}",
                )

    page = st.session_state.get(f"{table}_page", 1)
    result = master_data.list_entries(table, search=search, status=status, filters=filters, page=page)
    if result["total_pages"] and page > result["total_pages"]:
        st.session_state[f"{table}_page"] = 1
        st.rerun()

    if not result["items"]:
        st.info(f"No {config['label']} entries found.")
        return None

    st.dataframe(
        pd.DataFrame(result["items"]),
        column_config={"id": None},
        hide_index=True,
        use_container_width=True,
    )

    col1, col2, col3 = st.columns([1, 2, 1])
    with col1:
        if st.button("← Previous", disabled=page <= 1, key=f"{table}_prev"):
            st.session_state[f"{table}_page"] = page - 1
            st.rerun()
    with col2:
        st.caption(f"Page {result['page']} of {result['total_pages']} ({result['total']} entries)")
    with col3:
        if st.button("Next →", disabled=page >= result["total_pages"], key=f"{table}_next"):
            st.session_state[f"{table}_page"] = page + 1
            st.rerun()

    return result["items"]


def render_business_masters():
    """Simple name / code masters grouped by category"""
    category = st.selectbox(
        "Category",
        list(business_master.BUSINESS_CATEGORIES.keys()),
        format_func=lambda x: business_master.BUSINESS_CATEGORIES[x],
        key="business_category",
    )
    search = st.text_input("Search", key="business_search")
    result = business_master.list_business_entities(category, search=search)

    if result["data"]:
        st.dataframe(
            pd.DataFrame(result["data"]),
            column_config={"id": None, "category": None},
            hide_index=True,
            use_container_width=True,
        )
        st.caption(f"{result['total']} entries")
    else:
        st.info("No entries found.")

    with st.form(f"business_form_{category}"):
        st.subheader(f"Add {business_master.BUSINESS_CATEGORIES[category]}")
        col1, col2 = st.columns(2)
        with col1:
            name = st.text_input("Name *")
        with col2:
            code = st.text_input("Code *")
        description = st.text_area("Description")
        is_active = st.checkbox("Active", value=True)
        submitted = st.form_submit_button("Create")

    if submitted:
        try:
            business_master.create_business_entity(category, name, code, description, is_active)
            st.success(f"{category} created successfully")
            st.rerun()
        except ValueError as e:
            st.error(str(e))

    if result["data"]:
        render_business_edit(category, result["data"])


def render_business_edit(category: str, entries: list[dict]):
    """Edit or remove an existing entry of the category"""
    options = {row["id"]: f"{row['name']} ({row['code']})" for row in entries}
    selected_id = st.selectbox("Edit entry", list(options.keys()),
                               format_func=lambda x: options[x], key="business_edit_select")
    selected = next(row for row in entries if row["id"] == selected_id)

    with st.form(f"business_edit_{selected_id}"):
        col1, col2 = st.columns(2)
        with col1:
            name = st.text_input("Name *", value=selected["name"])
        with col2:
            code = st.text_input("Code *", value=selected["code"])
        description = st.text_area("Description", value=selected.get("description") or "")
        is_active = st.checkbox("Active", value=selected["is_active"])
        col1, col2 = st.columns(2)
        with col1:
            saved = st.form_submit_button("💾 Update", type="primary")
        with col2:
            deleted = st.form_submit_button("🗑️ Delete")

    if saved:
        try:
            business_master.update_business_entity(
                selected_id, category,
                name=name, code=code, description=description, is_active=is_active,
            )
            st.success(f"{category} updated successfully")
            st.rerun()
        except ValueError as e:
            st.error(str(e))

    if deleted:
        business_master.delete_business_entity(selected_id, category)
        st.toast(f"{category} deleted successfully")
        st.rerun()


def render():
    """Main render function for the master data page"""
    st.title("🗂️ Master Data")

    tab1, tab2 = st.tabs(["🚗 Motor & Geography", "🏷️ Business Masters"])

    with tab1:
        tables = list(master_data.MASTER_TABLES.keys())
        table = st.selectbox(
            "Master table",
            tables,
            format_func=lambda x: master_data.MASTER_TABLES[x]["label"],
            key="master_table",
        )

        entries = render_master_table(table)
        st.divider()

        if entries:
            label = master_data.MASTER_TABLES[table]["label"]
            options = {e["id"]: " / ".join(str(e[c]) for c in master_data.MASTER_TABLES[table]["columns"][:2])
                       for e in entries}
            selected_id = st.selectbox(
                f"Select {label} to edit:",
                [None, *options.keys()],
                format_func=lambda x: "➕ New entry" if x is None else options[x],
                key=f"{table}_selected",
            )
            if selected_id:
                selected = next(e for e in entries if e["id"] == selected_id)
                col1, col2 = st.columns([3, 1])
                with col1:
                    render_entry_form(table, selected)
                with col2:
                    if st.button("🗑️ Delete", key=f"{table}_delete_{selected_id}"):
                        master_data.delete_entry(table, selected_id)
                        st.toast(f"{label} deleted successfully")
                        st.rerun()
            else:
                render_entry_form(table)
        else:
            render_entry_form(table)

    with tab2:
        render_business_masters()


# Entry point for backwards compatibility
if __name__ == "__main__":
    st.set_page_config(page_title="Master Data", page_icon="🗂️", layout="wide")
    render()
