"""Streamlit explorer for the erythrocyte oxygen transport equations."""

from __future__ import annotations

import csv
from dataclasses import asdict
import io
import json

import altair as alt
import numpy as np
import pandas as pd
import streamlit as st

from rbc_o2 import (
    STANDARD_CONDITIONS,
    HillCoefficientMode,
    K4PrimeMode,
    P50Mode,
    PhysiologicalInputs,
    erythrocyte_ph,
    model_dash_from_inputs,
    model_hill,
    oxygen_delivery,
    p50_adjusted,
    total_oxygen_content_mechanistic,
    total_oxygen_content_simple,
    validate_inputs,
)


def _default_inputs() -> PhysiologicalInputs:
    return PhysiologicalInputs()


def _compute_p50(inputs: PhysiologicalInputs, p50_mode: P50Mode) -> float:
    if p50_mode is P50Mode.STANDARD:
        return STANDARD_CONDITIONS.p50_mmhg
    return p50_adjusted(
        ph_rbc=erythrocyte_ph(inputs.ph_plasma),
        pco2_mmhg=inputs.pco2_mmhg,
        dpg_rbc_mol_l=inputs.dpg_rbc_mol_l,
        temperature_c=inputs.temperature_c,
    )


def _build_curve_frame(
    inputs: PhysiologicalInputs,
    p50_mode: P50Mode = P50Mode.COMPUTED,
    hill_mode: HillCoefficientMode = HillCoefficientMode.PO2_DEPENDENT,
    po2_max_mmhg: int = 100,
) -> pd.DataFrame:
    """Long-form curve table with the standard curve and the current one."""

    po2 = np.arange(0, po2_max_mmhg + 1, dtype=float)
    p50 = _compute_p50(inputs, p50_mode)
    rows = []
    for series, series_p50 in (("standard", STANDARD_CONDITIONS.p50_mmhg), ("current", p50)):
        saturation = model_hill(po2, series_p50, hill_mode=hill_mode)
        for po2_value, sat_value in zip(po2, saturation):
            rows.append(
                {
                    "series": series,
                    "po2_mmhg": float(po2_value),
                    "saturation_percent": float(sat_value) * 100.0,
                }
            )
    return pd.DataFrame(rows)


def _build_csv_text(curve_df: pd.DataFrame) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(["series", "po2_mmhg", "saturation_percent"])
    for row in curve_df.itertuples(index=False):
        writer.writerow([row.series, f"{row.po2_mmhg:.12g}", f"{row.saturation_percent:.12g}"])
    return buffer.getvalue()


def _summary_metrics(
    inputs: PhysiologicalInputs,
    p50_mode: P50Mode = P50Mode.COMPUTED,
    k4_mode: K4PrimeMode = K4PrimeMode.COMPUTED,
    hill_mode: HillCoefficientMode = HillCoefficientMode.PO2_DEPENDENT,
    bind: float = 1.34,
) -> dict[str, float]:
    """Saturation, content and delivery at the current inputs."""

    validate_inputs(inputs)
    p50 = _compute_p50(inputs, p50_mode)
    sat_hill = model_hill(inputs.po2_mmhg, p50, hill_mode=hill_mode)
    dash = model_dash_from_inputs(inputs, p50_mode=p50_mode, k4_mode=k4_mode)
    content_simple_ml_l = total_oxygen_content_simple(
        bind=bind, hb_g_l=inputs.hb_blood_g_l, sat=sat_hill, po2_mmhg=inputs.po2_mmhg
    )
    content_dash_ml_dl = total_oxygen_content_mechanistic(
        po2_mmhg=inputs.po2_mmhg,
        hct=inputs.hematocrit,
        sat=dash.saturation,
        hb_blood_g_l=inputs.hb_blood_g_l,
        temperature_c=inputs.temperature_c,
        water_plasma=inputs.water_fraction_plasma,
        water_rbc=inputs.water_fraction_rbc,
    )
    return {
        "p50_mmhg": float(p50),
        "saturation_hill": float(sat_hill),
        "saturation_dash": float(dash.saturation),
        "k4_prime": float(dash.k4_prime),
        "khbo2": float(dash.khbo2),
        "content_simple_ml_l": float(content_simple_ml_l),
        "content_dash_ml_dl": float(content_dash_ml_dl),
        # L/min x mL/dL x 10 dL/L
        "delivery_dash_ml_min": float(oxygen_delivery(inputs.cardiac_output_l_min, content_dash_ml_dl * 10.0)),
        "delivery_simple_ml_min": float(oxygen_delivery(inputs.cardiac_output_l_min, content_simple_ml_l)),
    }


def main() -> None:
    st.set_page_config(page_title="RBC-O2", layout="wide")
    st.title("RBC-O2 - Hemoglobin oxygen dissociation explorer")
    st.caption("Hill and Dash et al. (2016) saturation models with p50 shifts from pH, PCO2, 2,3-BPG and temperature.")

    defaults = _default_inputs()

    with st.sidebar:
        st.header("Inputs")
        po2_mmhg = st.slider("PO2 [mmHg]", min_value=1.0, max_value=150.0, value=defaults.po2_mmhg, step=1.0)
        pco2_mmhg = st.slider("PCO2 [mmHg]", min_value=20.0, max_value=60.0, value=defaults.pco2_mmhg, step=1.0)
        ph_plasma = st.slider("Plasma pH [-]", min_value=6.8, max_value=7.8, value=defaults.ph_plasma, step=0.01)
        dpg_mmol_l = st.slider(
            "2,3-BPG [mmol/L]",
            min_value=0.5,
            max_value=10.0,
            value=defaults.dpg_rbc_mol_l * 1000.0,
            step=0.05,
        )
        temperature_c = st.slider("Temperature [C]", min_value=20.0, max_value=42.0, value=defaults.temperature_c, step=0.5)
        hematocrit = st.slider("Hematocrit [-]", min_value=0.30, max_value=0.55, value=defaults.hematocrit, step=0.005)
        hb_blood_g_l = st.slider("Hemoglobin [g/L]", min_value=100.0, max_value=200.0, value=defaults.hb_blood_g_l, step=1.0)
        cardiac_output_l_min = st.slider(
            "Cardiac output [L/min]",
            min_value=2.0,
            max_value=35.0,
            value=defaults.cardiac_output_l_min,
            step=0.5,
        )

        st.header("Model")
        hill_mode = HillCoefficientMode(
            st.radio("Hill coefficient", [m.value for m in HillCoefficientMode], index=1, horizontal=True)
        )
        p50_mode = P50Mode(st.radio("p50", [m.value for m in P50Mode], index=1, horizontal=True))
        k4_mode = K4PrimeMode(st.radio("K4'", [m.value for m in K4PrimeMode], index=1, horizontal=True))
        bind = st.selectbox("O2 binding capacity [mL/g]", [1.30, 1.34, 1.39], index=1)

    inputs = PhysiologicalInputs(
        po2_mmhg=po2_mmhg,
        pco2_mmhg=pco2_mmhg,
        ph_plasma=ph_plasma,
        dpg_rbc_mol_l=dpg_mmol_l / 1000.0,
        temperature_c=temperature_c,
        hematocrit=hematocrit,
        hb_blood_g_l=hb_blood_g_l,
        cardiac_output_l_min=cardiac_output_l_min,
    )

    try:
        metrics = _summary_metrics(inputs, p50_mode=p50_mode, k4_mode=k4_mode, hill_mode=hill_mode, bind=bind)
    except ValueError as exc:
        st.error(f"Invalid inputs: {exc}")
        return

    curve_df = _build_curve_frame(inputs, p50_mode=p50_mode, hill_mode=hill_mode)

    st.markdown("### Oxygen dissociation curve")
    curve_chart = (
        alt.Chart(curve_df)
        .mark_line()
        .encode(
            x=alt.X("po2_mmhg:Q", title="Partial pressure of oxygen [mmHg]", scale=alt.Scale(domain=[0, 100])),
            y=alt.Y("saturation_percent:Q", title="Oxygen saturation [%]", scale=alt.Scale(domain=[0, 100])),
            color=alt.Color("series:N", title="Curve"),
        )
        .properties(height=380)
    )
    p50_df = pd.DataFrame(
        {
            "series": ["standard", "current"],
            "p50_mmhg": [STANDARD_CONDITIONS.p50_mmhg, metrics["p50_mmhg"]],
        }
    )
    p50_rules = (
        alt.Chart(p50_df)
        .mark_rule(strokeDash=[4, 4])
        .encode(x="p50_mmhg:Q", color=alt.Color("series:N", title="Curve"))
    )
    st.altair_chart(curve_chart + p50_rules, use_container_width=True)

    c1, c2 = st.columns(2)
    c1.download_button(
        "Download curve CSV",
        data=_build_csv_text(curve_df),
        file_name="rbc_o2_dissociation_curve.csv",
        mime="text/csv",
    )
    c2.download_button(
        "Download inputs JSON",
        data=json.dumps({"inputs": asdict(inputs), "metrics": metrics}, indent=2, sort_keys=True),
        file_name="rbc_o2_inputs.json",
        mime="application/json",
    )

    st.markdown("### Summary")
    col1, col2 = st.columns(2)
    col1.metric("p50 [mmHg]", f"{metrics['p50_mmhg']:.2f}")
    col2.metric("p50 shift [mmHg]", f"{metrics['p50_mmhg'] - STANDARD_CONDITIONS.p50_mmhg:+.2f}")
    col1.metric("SHbO2 Hill [%]", f"{metrics['saturation_hill'] * 100.0:.2f}")
    col2.metric("SHbO2 Dash [%]", f"{metrics['saturation_dash'] * 100.0:.2f}")
    col1.metric("K4' [1/M]", f"{metrics['k4_prime']:.4e}")
    col2.metric("KHbO2 [1/M]", f"{metrics['khbo2']:.4e}")
    col1.metric("O2 content, simple [mL/L]", f"{metrics['content_simple_ml_l']:.1f}")
    col2.metric("O2 content, Dash [mL/dL]", f"{metrics['content_dash_ml_dl']:.2f}")
    col1.metric("DO2, simple [mL/min]", f"{metrics['delivery_simple_ml_min']:.0f}")
    col2.metric("DO2, Dash [mL/min]", f"{metrics['delivery_dash_ml_min']:.0f}")


if __name__ == "__main__":
    main()
