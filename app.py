"""Year Clock: Streamlit entry point.

    uv run streamlit run app.py
"""

import runpy

runpy.run_module("yearclock.app", run_name="__main__")
