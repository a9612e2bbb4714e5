"""
Training Page Module
====================
LMS masters (training modules) and issued certificates
"""

from datetime import date

import pandas as pd
import streamlit as st
from dotenv import load_dotenv

from core import reference_data, training

# Load environment variables
load_dotenv()


def _topics_editor(module: dict = None, key: str = "new") -> list[dict]:
    """Editable topic grid; total duration is recomputed on save."""
    topics = module["topics"] if module else [{"name": "", "duration": 1.0}]
    edited = st.data_editor(
        pd.DataFrame(topics, columns=["name", "duration"]),
        column_config={
            "name": st.column_config.TextColumn("Topic", required=True),
            "duration": st.column_config.NumberColumn(
                "Duration (hrs)", min_value=training.MIN_TOPIC_DURATION, step=0.5, required=True
            ),
        },
        num_rows="dynamic",
        hide_index=True,
        use_container_width=True,
        key=f"topics_{key}",
    )
    edited = edited.dropna(how="all")
    # blank cells come back as NaN; validation expects None
    return edited.astype(object).where(edited.notna(), None).to_dict("records")


def render_module_form(module: dict = None):
    """Create or edit a training module"""
    is_edit = module is not None
    key = module["id"] if is_edit else "new"
    agent_types = {a["id"]: a["name"] for a in reference_data.AGENT_TYPES}
    policy_types = {p["id"]: p["name"] for p in reference_data.POLICY_TYPES}

    st.subheader("Edit Training Module" if is_edit else "Add Training Module")
    col1, col2 = st.columns(2)
    with col1:
        agent_type_id = st.selectbox(
            "Agent Type *", list(agent_types.keys()),
            index=list(agent_types.keys()).index(module["agent_type_id"]) if is_edit else 0,
            format_func=lambda x: agent_types[x], key=f"agent_type_{key}",
        )
        module_name = st.text_input("Module Name *", value=module["module_name"] if is_edit else "",
                                    key=f"module_name_{key}")
    with col2:
        policy_type_ids = st.multiselect(
            "Policy Types *", list(policy_types.keys()),
            default=module["policy_type_ids"] if is_edit else [],
            format_func=lambda x: policy_types[x], key=f"policy_types_{key}",
        )
        validity_from = st.date_input(
            "Valid From *", value=date.fromisoformat(module["validity_from"]) if is_edit else date.today(),
            key=f"validity_from_{key}",
        )
        validity_to = st.date_input(
            "Valid To *", value=date.fromisoformat(module["validity_to"]) if is_edit else None,
            key=f"validity_to_{key}",
        )

    topics = _topics_editor(module, key)
    st.caption(f"Total duration: {training.calculate_total_duration(topics)} hrs")
    is_active = st.checkbox("Active", value=module["is_active"] if is_edit else True, key=f"active_{key}")

    if st.button("Update Module" if is_edit else "Create Module", key=f"save_module_{key}", type="primary"):
        data = {
            "agent_type_id": agent_type_id,
            "policy_type_ids": policy_type_ids,
            "module_name": module_name,
            "topics": topics,
            "validity_from": validity_from.isoformat() if validity_from else None,
            "validity_to": validity_to.isoformat() if validity_to else None,
            "is_active": is_active,
        }
        try:
            if is_edit:
                training.update_training_module(module["id"], data)
                st.success("Training module updated successfully!")
            else:
                training.create_training_module(data)
                st.success("Training module created successfully!")
            st.rerun()
        except ValueError as e:
            st.error(str(e))


def render_modules():
    col1, col2, col3 = st.columns([2, 1, 1])
    with col1:
        search = st.text_input("Search modules", key="module_search")
    with col2:
        agent_types = {"ALL": "All", **{a["id"]: a["name"] for a in reference_data.AGENT_TYPES}}
        agent_type_id = st.selectbox("Agent Type", list(agent_types.keys()),
                                     format_func=lambda x: agent_types[x], key="module_agent_type")
    with col3:
        status = st.selectbox("Status", ["ALL", "ACTIVE", "INACTIVE"], key="module_status")

    modules = training.list_training_modules(
        search=search, agent_type_id=None if agent_type_id == "ALL" else agent_type_id, status=status
    )

    if modules:
        df = pd.DataFrame(modules)
        df["policy_type_names"] = df["policy_type_names"].apply(", ".join)
        df["topic_count"] = df["topics"].apply(len)
        st.dataframe(
            df[["module_name", "agent_type_name", "policy_type_names", "topic_count",
                "total_duration", "validity_from", "validity_to", "is_active"]],
            column_config={
                "module_name": st.column_config.TextColumn("Module", width="large"),
                "agent_type_name": "Agent Type",
                "policy_type_names": "Policy Types",
                "topic_count": st.column_config.NumberColumn("Topics", width="small"),
                "total_duration": st.column_config.NumberColumn("Hours", format="%.1f"),
            },
            hide_index=True,
            use_container_width=True,
        )
    else:
        st.info("No training modules found.")

    st.divider()
    options = {m["id"]: m["module_name"] for m in modules}
    selected_id = st.selectbox(
        "Select module to edit:", [None, *options.keys()],
        format_func=lambda x: "➕ New module" if x is None else options[x], key="module_selected",
    )
    if selected_id:
        module = next(m for m in modules if m["id"] == selected_id)
        render_module_form(module)
        if st.button("🗑️ Delete Module", key=f"delete_module_{selected_id}"):
            training.delete_training_module(selected_id)
            st.toast("Training module deleted successfully")
            st.rerun()
    else:
        render_module_form()


def render_certificates():
    col1, col2, col3 = st.columns([2, 1, 1])
    with col1:
        search = st.text_input("Search certificates", key="cert_search",
                               placeholder="Agent, certificate number or exam")
    with col2:
        agent_type = st.selectbox("Agent Type", ["all", *(a["name"] for a in reference_data.AGENT_TYPES)],
                                  key="cert_agent_type")
    with col3:
        status = st.selectbox("Status", ["all", *training.CERTIFICATE_STATUSES], key="cert_status")

    rows = training.list_certificates(search=search, agent_type=agent_type, status=status)
    summary = training.certificate_summary(rows)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Certificates", summary["total"])
    col2.metric("Active", summary["active"])
    col3.metric("Expired", summary["expired"])
    col4.metric("Downloads", summary["total_downloads"])

    if not rows:
        st.info("No certificates found.")
        return

    st.dataframe(
        pd.DataFrame(rows),
        column_config={
            "id": None,
            "agent_id": None,
            "percentage": st.column_config.NumberColumn("Score %", format="%.0f%%"),
        },
        hide_index=True,
        use_container_width=True,
    )

    options = {r["id"]: f"{r['certificate_number']} ({r['agent_name']})" for r in rows}
    selected_id = st.selectbox("Certificate", list(options.keys()),
                               format_func=lambda x: options[x], key="cert_selected")
    col1, col2 = st.columns(2)
    with col1:
        if st.button("⬇️ Record Download", key="cert_download"):
            try:
                training.record_certificate_download(selected_id)
                st.toast("Download recorded")
                st.rerun()
            except ValueError as e:
                st.error(str(e))
    with col2:
        if st.button("🚫 Revoke", key="cert_revoke"):
            training.revoke_certificate(selected_id)
            st.toast("Certificate revoked")
            st.rerun()


def render():
    """Main render function for the training page"""
    st.title("🎓 Training & Certification")

    tab1, tab2 = st.tabs(["📚 Training Modules", "📜 Certificates"])
    with tab1:
        render_modules()
    with tab2:
        render_certificates()


# Entry point for backwards compatibility
if __name__ == "__main__":
    st.set_page_config(page_title="Training", page_icon="🎓", layout="wide")
    render()
