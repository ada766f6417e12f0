"""Streamlit entry point: `streamlit run app.py` serves the UI in app/app.py"""
import runpy
from pathlib import Path

UI_SCRIPT = Path(__file__).parent / "app" / "app.py"

runpy.run_path(str(UI_SCRIPT), run_name="__main__")
