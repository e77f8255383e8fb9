"""
Agri GDP Live — Charts
Builds the two scatter figures (full history + recent years) with plotly.
The page draws them with Plotly.js, so figures leave here as plain dicts.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

import plotly.graph_objects as go

import config
from sheet import Series

_TITLE_BASE = "Value Added in the Agricultural Sector as a Percent of {country} GDP"
_MARGIN = dict(t=60, r=40, b=80, l=100)


def uniform_ticks(low, high, step):
    """Ticks at multiples of step, from floor(low / step) * step up to high."""
    if step <= 0:
        raise ValueError("step must be positive")
    start = math.floor(low / step) * step
    ticks = []
    i = 0
    while True:
        t = round(start + i * step, 10)
        if t > high:
            break
        ticks.append(t)
        i += 1
    return sorted(set(ticks))


def padded_range(values):
    """[min * 0.9, max * 1.1], swapping the factors for negative bounds."""
    lo, hi = min(values), max(values)
    low = lo * (config.Y_PAD_LOW if lo >= 0 else config.Y_PAD_HIGH)
    high = hi * (config.Y_PAD_HIGH if hi >= 0 else config.Y_PAD_LOW)
    return [low, high]


def filter_years(series, start, end):
    """Points with start <= year <= end, order kept."""
    out = Series()
    for year, value in series.points():
        if start <= year <= end:
            out.years.append(year)
            out.values.append(value)
    return out


def _two_places(value):
    """Round half away from zero to 2 places, like JavaScript's toFixed(2)."""
    return str(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def hover_text(series):
    return [f"Year: {y}<br>Value: {_two_places(v)}" for y, v in series.points()]


def _scatter(series):
    return go.Scatter(
        x=list(series.years),
        y=list(series.values),
        mode="markers",
        text=hover_text(series),
        hoverinfo="text",
    )


def _layout(title, xaxis, y_range, y_ticks):
    return go.Layout(
        template="none",
        title=dict(text=title),
        xaxis=xaxis,
        yaxis=dict(
            title=dict(text=config.VALUE_COLUMN),
            range=y_range,
            showgrid=True,
            tickvals=y_ticks,
            tickformat=".2f",
        ),
        hovermode="x unified",
        margin=_MARGIN,
        autosize=True,
    )


def _figure_json(fig):
    # page renders with the plain Plotly.js defaults
    out = fig.to_plotly_json()
    out["layout"].pop("template", None)
    return out


def build_full_figure(series):
    """Every valid year in the sheet."""
    y_range = padded_range(series.values)
    title = _TITLE_BASE.format(country=config.COUNTRY_ADJECTIVE) + " Historically"
    xaxis = dict(title=dict(text="Year"), showgrid=True, tickangle=-45)
    layout = _layout(title, xaxis, y_range,
                     uniform_ticks(y_range[0], y_range[1], config.FULL_Y_TICK_STEP))
    return go.Figure(data=[_scatter(series)], layout=layout)


def _recent_figure(recent):
    if not recent.years:
        return None

    start, end = config.RECENT_START_YEAR, config.RECENT_END_YEAR
    y_range = padded_range(recent.values)
    title = _TITLE_BASE.format(country=config.COUNTRY_ADJECTIVE) + f" ({start} - {end})"
    xaxis = dict(
        title=dict(text="Year"),
        showgrid=True,
        tickangle=-45,
        tickvals=list(range(start, end + 2)),
        tickformat="d",
    )
    layout = _layout(title, xaxis, y_range,
                     uniform_ticks(y_range[0], y_range[1], config.RECENT_Y_TICK_STEP))
    return go.Figure(data=[_scatter(recent)], layout=layout)


def build_recent_figure(series):
    """Recent-years window, one x tick per year. None if the window is empty."""
    recent = filter_years(series, config.RECENT_START_YEAR, config.RECENT_END_YEAR)
    return _recent_figure(recent)


def build_charts(series):
    """JSON-ready payload for the page: both figures plus point counts."""
    start, end = config.RECENT_START_YEAR, config.RECENT_END_YEAR
    recent_points = filter_years(series, start, end)
    full = build_full_figure(series)
    recent = _recent_figure(recent_points)
    return {
        "full": _figure_json(full),
        "recent": _figure_json(recent) if recent is not None else None,
        "recentMessage": None if recent is not None else f"No data in {start}–{end}.",
        "points": len(series),
        "recentPoints": len(recent_points),
    }
