import streamlit as st, numpy as np
from diodesim.models.diode import AnimationSpeed, DopingLevel, SimulationMode, get_params
from diodesim.physics.bias import explain
from diodesim.physics.carriers import init_carriers, step_carriers
from diodesim.physics.circuit import circuit_readout
from diodesim.physics.depletion import depletion_factor
from diodesim.postprocess.visualization import plot_iv_curves, plot_band_sketch, plot_carriers, plot_circuit
from diodesim.workflows.sweep import sample_curve

st.set_page_config(page_title="DiodeSim Viewer", layout="wide")
voltage = st.sidebar.slider("Applied voltage (V)", -5.0, 5.0, 0.0, 0.05)
doping = st.sidebar.selectbox("Doping", list(DopingLevel), index=1, format_func=lambda d: d.value)
mode = st.sidebar.radio("Model", list(SimulationMode), format_func=lambda m: m.value)
speed = st.sidebar.selectbox("Animation speed", list(AnimationSpeed),
                             index=list(AnimationSpeed).index(AnimationSpeed.NORMAL),
                             format_func=lambda s: s.label)
ticks = st.sidebar.slider("Animation ticks", 0, 600, 120, 20)
show_band = st.sidebar.checkbox("Show band diagram", value=False)

@st.cache_data
def _curves(d: DopingLevel):
    return sample_curve(get_params(d))

params = get_params(doping)
circuit = circuit_readout(voltage, params, mode)
st.title("DiodeSim Viewer")
c1, c2, c3 = st.columns(3)
c1.metric("Current", f"{circuit.current_mA:.3f} mA")
c2.metric("Depletion factor", f"{depletion_factor(voltage, params.Vbi):.2f}")
c3.metric("Rs / V_bd", f"{params.Rs:g} Ω / {params.breakdown_voltage:g} V")

left, right = st.columns([3, 2])
with left:
    state = init_carriers(seed=0)
    rng = np.random.default_rng(1)
    for _ in range(ticks):
        state = step_carriers(state, voltage, params, rng, speed=speed.value)
    fig, _ = plot_carriers(state, voltage, params)
    st.pyplot(fig)
    fig, _ = plot_iv_curves(_curves(doping), mode, operating_voltage=voltage, params=params,
                            ylim=(-50.0, 50.0))
    st.pyplot(fig)
with right:
    fig, _ = plot_circuit(circuit)
    st.pyplot(fig)
    st.caption(circuit.summary())
    if show_band:
        fig, _ = plot_band_sketch(voltage, params.Vbi)
        st.pyplot(fig)
    st.text(explain(voltage, params, mode))
st.caption("Educational mode: soft breakdown is exaggerated (×1000) for visibility.")
