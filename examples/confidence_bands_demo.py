"""
Confidence bands demo.

Demonstrates:
- A synthetic forecast with three nested confidence bands
- build_query / transform_props feeding the ConfidenceBandsChart widget
- Switching the series between positive, negative and mixed-sign values
- Hover reporting through on_focused_series

Run:
    python examples/confidence_bands_demo.py
"""

import numpy as np
import pandas as pd
from nicegui import ui

from confidencebands import ChartProps, build_query, configure_logging, transform_props
from confidencebands.widget import ConfidenceBandsChart

configure_logging(level="INFO")

FORM_DATA = {
    "x_axis": "ds",
    "y_prediction_hat": "yhat",
    "metrics": ["actual"],
    "band_confidence_l1": ["yhat_lower_95", "yhat_upper_95"],
    "band_confidence_l2": ["yhat_lower_85", "yhat_upper_85"],
    "band_confidence_l3": ["yhat_lower_75", "yhat_upper_75"],
    "band_legend_l3": "Likely range",
    "zoomable": True,
    "y_axis_title": "Value",
}


def make_forecast(offset: float, n: int = 60) -> pd.DataFrame:
    """Forecast with widening bands around a slow sine trend."""
    t = np.arange(n)
    yhat = offset + 10 * np.sin(t / 8)
    spread = 1 + t / 10
    df = pd.DataFrame({"ds": t, "yhat": yhat, "actual": yhat + np.random.randn(n)})
    for level, z in (("95", 1.96), ("85", 1.44), ("75", 1.15)):
        df[f"yhat_lower_{level}"] = yhat - z * spread
        df[f"yhat_upper_{level}"] = yhat + z * spread
    return df


def make_props(offset: float):
    query = build_query(FORM_DATA)
    return transform_props(
        ChartProps(
            width=900,
            height=450,
            form_data=query["form_data"],
            queries_data=[{"data": make_forecast(offset), "label_map": {"actual": ["Actual"]}}],
        )
    )


@ui.page("/")
def index():
    ui.label("Confidence Bands Demo").classes("text-3xl font-bold mb-6")

    focused = ui.label("Hover a series").classes("text-sm text-gray-500")

    def on_focused_series(name):
        focused.text = f"Focused: {name}" if name else "Hover a series"

    chart = ConfidenceBandsChart(make_props(30.0), on_focused_series=on_focused_series)

    with ui.row().classes("gap-2"):
        ui.button("Positive", on_click=lambda: chart.update_options(make_props(30.0)))
        ui.button("Negative", on_click=lambda: chart.update_options(make_props(-30.0)))
        ui.button("Mixed", on_click=lambda: chart.update_options(make_props(0.0)))

    chart.render()


if __name__ in {"__main__", "__mp_main__"}:
    ui.run(port=8004, reload=True)
