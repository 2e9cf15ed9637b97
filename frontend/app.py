import streamlit as st

from frontend.config import configure_logging, settings
from frontend.form import FIELDS, FormController
from frontend.messages import is_high_risk, text

configure_logging()

locale = settings.locale

if "form" not in st.session_state:
    st.session_state["form"] = FormController(locale=locale)
    st.session_state["generation"] = 0
controller = st.session_state["form"]
state = controller.state

st.title(text("title", locale))

st.header(text("student_data", locale))
for name in FIELDS:
    # Keys change with each form session so Clear empties the fields
    value = st.text_input(text(name, locale), key=f"{name}_{st.session_state['generation']}")
    setattr(state, name, value)

col1, col2 = st.columns(2)
with col1:
    submit_slot = st.empty()
    submitted = submit_slot.button(
        text("submit", locale), disabled=state.in_flight, type="primary", key="submit"
    )
with col2:
    cleared = st.button(text("clear", locale))

if submitted:
    # Locked for the length of the request, the rerun draws it enabled again
    submit_slot.button(text("submit", locale), disabled=True, type="primary", key="submit_pending")
    with st.spinner(text("loading", locale)):
        controller.submit_prediction()
    st.rerun()

if cleared:
    controller.close()
    st.session_state["form"] = FormController(locale=locale)
    st.session_state["generation"] += 1
    st.rerun()

if state.show_result:
    st.header(text("result", locale))
    if state.risk_score is not None:
        color = "red" if is_high_risk(state.risk_score) else "green"
        risk_line = text("risk", locale, percentage=state.risk_percentage)
        st.markdown(f"### :{color}[{risk_line}]")
    st.markdown(state.result_message)
    if state.model_version is not None:
        st.caption(text("model", locale, version=state.model_version))
