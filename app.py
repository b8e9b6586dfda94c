import logging

import pandas as pd
import streamlit as st

from cipher_core.alphabet import LETTER_COUNT, Mode
from cipher_core.settings import DEFAULT_SHIFT, DEFAULT_TEXT, normalize_state
from cipher_core.wheel_view import compute_wheel

logger = logging.getLogger(__name__)


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .app-subtitle {color: #4b5563;text-align: center;margin-bottom: 12px;}
        .shift-value {font-size: 1.1rem;font-weight: 600;color: #1e40af;}
        .how-it-works {background: linear-gradient(90deg, #2563eb, #7c3aed);color: #ffffff;
                       border-radius: 12px;padding: 16px;margin-top: 12px;}
        .how-it-works .example {background: rgba(255,255,255,0.2);border-radius: 8px;padding: 10px;margin-top: 8px;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


def render_alphabet_mapping(records, mode_label: str):
    if not records:
        st.info("No mapping available.")
        return
    table = pd.DataFrame(records)
    display = pd.DataFrame(
        [table["original"].tolist(), table["shifted"].tolist()],
        index=["Original", mode_label],
        columns=table["original"].tolist(),
    )
    st.dataframe(display)


def render_how_it_works(description: str, shift: int):
    st.markdown(
        f"""
        <div class="how-it-works">
          <div>The Caesar cipher is a substitution cipher where each letter in the plaintext
          is shifted a certain number of places down the alphabet.</div>
          <div class="example">For example, with a shift of {shift}:<br/>{description}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


# ---------- UI setup ----------
st.set_page_config(page_title="Caesar Cipher Visualizer", layout="centered")
inject_base_styles()
st.title("Caesar Cipher Visualizer")
st.markdown(
    "<div class='app-subtitle'>Encrypt and decrypt messages with the ancient cipher technique</div>",
    unsafe_allow_html=True,
)

mode_choice = st.radio("Mode", ["Encrypt", "Decrypt"], index=0, horizontal=True, key="mode")
input_col, output_col = st.columns(2)
with input_col:
    input_text = st.text_area("Input Text", value=DEFAULT_TEXT, height=160, key="input_text")
shift = st.slider("Shift Value", min_value=0, max_value=LETTER_COUNT - 1, value=DEFAULT_SHIFT, step=1, key="shift")

raw_state = {"text": input_text, "shift": shift, "mode": mode_choice}
state = normalize_state(raw_state)
logger.debug("Recomputing wheel for shift=%s mode=%s", state.shift, state.mode.value)

try:
    payload = compute_wheel(state)
except Exception as exc:
    logger.exception("compute_wheel failed")
    st.error(f"Could not compute the cipher wheel: {exc}")
    st.stop()

with output_col:
    st.markdown("**Output Text**")
    st.code(payload["output_text"] or " ", language=None)

st.markdown(f"<div class='shift-value'>Shift Value: {state.shift}</div>", unsafe_allow_html=True)

# ----- Visualization -----
st.subheader("Cipher Visualization")
st.vega_lite_chart(spec=payload["charts"]["wheel"])

st.subheader("Alphabet Mapping")
mode_label = "Encrypted" if state.mode is Mode.ENCRYPT else "Decrypted"
render_alphabet_mapping(payload["alphabet_table"], mode_label)

st.subheader("How It Works")
render_how_it_works(payload["description"], state.shift)
