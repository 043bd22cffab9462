from __future__ import annotations

import json
from dataclasses import asdict

import streamlit as st

from plainsight.config import glossary_from_config, load_config, options_from_config
from plainsight.glossary import GlossaryError, parse_glossary
from plainsight.simplify import MODES, SimplifyConfigError, simplify


st.set_page_config(page_title="PlainSight", layout="wide")

st.title("PlainSight")
st.write("Runs locally. Deterministic rewriting, no language model.")

cfg = load_config()

with st.sidebar:
    st.header("Options")
    default_mode = str(cfg.get("mode", "paragraph"))
    mode = st.selectbox("Mode", list(MODES), index=list(MODES).index(default_mode) if default_mode in MODES else 0)
    inline_glossary = st.checkbox("Inline glossary definitions", value=bool(cfg.get("inline_glossary", True)))

    st.divider()
    st.subheader("Glossary")
    glossary_file = st.file_uploader("Optional: glossary JSON ({\"term\": \"definition\"})", type=["json"])

text = st.text_area("Text to simplify", height=240)

run = st.button("Simplify")

if not run:
    st.stop()

try:
    if glossary_file is not None:
        glossary = parse_glossary(glossary_file.getvalue().decode("utf-8", errors="replace"), source=glossary_file.name)
    else:
        glossary = glossary_from_config(cfg)
    opts = options_from_config({**cfg, "mode": mode, "inline_glossary": bool(inline_glossary)}, glossary)
except (SimplifyConfigError, GlossaryError) as e:
    st.error(str(e))
    st.stop()

result = simplify(text, opts)

col1, col2 = st.columns(2)

with col1:
    st.subheader("Preview")
    if opts.mode == "bullets":
        st.markdown("\n".join(f"- {b}" for b in result.bullets) or "_No sentences found._")
    else:
        st.text_area("Simplified", result.simple, height=220)

with col2:
    st.subheader("Terms")
    if result.terms:
        st.dataframe([asdict(t) for t in result.terms], use_container_width=True)
    else:
        st.caption("No glossary terms in this text.")

    st.download_button(
        "Download result (JSON)",
        data=json.dumps(asdict(result), ensure_ascii=False, indent=2),
        file_name="plainsight_result.json",
        mime="application/json",
    )
