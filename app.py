import streamlit as st
import plotly.graph_objects as go

import state as calc
from bmi import BANDS, bands_frame
from config import Settings
from logging_config import setup_logging
from tips import request_tip

GAUGE_MIN = 10.0
GAUGE_MAX = 50.0

# ------------------------ HELPER FUNCTIONS ------------------------

def gauge_figure(value: float) -> go.Figure:
    """Gauge placing the BMI on the colored category bands."""
    upper = max(GAUGE_MAX, value)
    lower = min(GAUGE_MIN, value)
    steps = [
        {"range": [max(band.lower, lower), min(band.upper, upper)], "color": band.tone.color}
        for band in BANDS
    ]
    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=round(value, 1),
            number={"valueformat": ".1f"},
            gauge={
                "axis": {"range": [lower, upper]},
                "bar": {"color": "#333333", "thickness": 0.25},
                "steps": steps,
            },
        )
    )
    fig.update_layout(
        height=240,
        margin=dict(l=30, r=30, t=20, b=10),
        paper_bgcolor="white",
        font=dict(color="#333333"),
    )
    return fig


def render_form(calculator: calc.CalculatorState):
    calculator.form.height = st.text_input("Altura (cm)", placeholder="Ex: 175", key="height")
    calculator.form.weight = st.text_input("Peso (kg)", placeholder="Ex: 70", key="weight")

    if calculator.error:
        st.error(calculator.error)

    label = "Calculando..." if calculator.is_loading else "Calcular IMC"
    if st.button(label, type="primary", disabled=not calculator.can_submit):
        calc.submit(calculator)
        st.rerun()


def render_result(calculator: calc.CalculatorState):
    result = calculator.result
    with st.container(border=True):
        st.metric("Seu IMC é", f"{result.value:.1f}")
        st.markdown(
            f"<p style='color:{result.tone.color}; font-size:1.5rem; font-weight:600'>{result.category}</p>",
            unsafe_allow_html=True,
        )
        st.plotly_chart(gauge_figure(result.value))

        if calculator.tip.is_settled:
            st.markdown("**💡 Dica da IA**")
            st.info(calculator.tip.text)


def fetch_tip(calculator: calc.CalculatorState, settings: Settings):
    submission = calculator.submission
    result = calculator.result
    # a pending rerun stops the script when the spinner closes
    with st.spinner("Calculando..."):
        outcome = request_tip(result.value, result.category, settings=settings)
        calc.settle_tip(calculator, submission, outcome)
    st.rerun()


# ------------------------ MAIN LOGIC ------------------------

def main():
    settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)

    st.set_page_config(page_title="Calculadora de IMC", page_icon="⚖️")
    st.title("⚖️ Calculadora de IMC")
    st.caption("com dicas personalizadas por IA")

    calculator = calc.load_state(st.session_state)
    render_form(calculator)

    if calculator.result is not None:
        render_result(calculator)
        if calculator.is_loading:
            fetch_tip(calculator, settings)

    with st.expander("📋 Tabela de classificação"):
        st.dataframe(bands_frame(), hide_index=True)


# ------------------------ EXECUTE ------------------------
if __name__ == "__main__":
    main()
