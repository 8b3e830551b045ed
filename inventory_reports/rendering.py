from typing import Any, Optional, Protocol
import plotly.graph_objects as go

from . import settings
from .schemas import ChartKind, ReportPanel


class Renderer(Protocol):
    """Turns finished chart rows into a visual artifact the caller never inspects."""

    def render(
        self, kind: ChartKind, data: list[dict[str, Any]], options: Optional[dict] = None
    ) -> Any: ...


class PlotlyRenderer:
    """Renders report panels as plotly figures."""

    def __init__(
        self, height: int = settings.CHART_HEIGHT, colors: Optional[list[str]] = None
    ):
        self.height = height
        self.colors = colors or settings.CHART_COLORS

    def render(
        self, kind: ChartKind, data: list[dict[str, Any]], options: Optional[dict] = None
    ) -> go.Figure:
        kind = ChartKind(kind)
        options = options or {}

        if not data:
            fig = self._empty()
        elif kind is ChartKind.BAR:
            fig = self._bar(data, options)
        elif kind is ChartKind.PIE:
            fig = self._pie(data)
        elif kind is ChartKind.LINE:
            fig = self._line(data, options)
        else:
            fig = self._table(data, options)

        fig.update_layout(
            title=options.get("title"),
            height=self.height,
            margin=dict(l=10, r=10, t=50, b=10),
        )
        return fig

    def _series(self, data: list[dict[str, Any]], options: dict) -> list[str]:
        return options.get("series") or [key for key in data[0] if key != "name"]

    def _empty(self) -> go.Figure:
        fig = go.Figure()
        fig.add_annotation(
            text="No data available", showarrow=False, x=0.5, y=0.5, xref="paper", yref="paper"
        )
        fig.update_xaxes(visible=False)
        fig.update_yaxes(visible=False)
        return fig

    def _bar(self, data: list[dict[str, Any]], options: dict) -> go.Figure:
        names = [row["name"] for row in data]
        fig = go.Figure()
        for i, series in enumerate(self._series(data, options)):
            fig.add_trace(
                go.Bar(
                    x=names,
                    y=[row.get(series, 0) for row in data],
                    name=series,
                    marker_color=self.colors[i % len(self.colors)],
                )
            )
        fig.update_layout(barmode="stack", showlegend=len(fig.data) > 1)
        return fig

    def _pie(self, data: list[dict[str, Any]]) -> go.Figure:
        return go.Figure(
            go.Pie(
                labels=[row["name"] for row in data],
                values=[row["value"] for row in data],
                marker=dict(colors=[self.colors[i % len(self.colors)] for i in range(len(data))]),
                textinfo="label+percent",
            )
        )

    def _line(self, data: list[dict[str, Any]], options: dict) -> go.Figure:
        periods = [row["name"] for row in data]
        fig = go.Figure()
        for i, series in enumerate(self._series(data, options)):
            fig.add_trace(
                go.Scatter(
                    x=periods,
                    y=[row.get(series, 0) for row in data],
                    mode="lines+markers",
                    name=series,
                    line=dict(color=self.colors[i % len(self.colors)]),
                )
            )
        if options.get("percentage"):
            fig.update_yaxes(range=[0, 100])
        return fig

    def _table(self, data: list[dict[str, Any]], options: dict) -> go.Figure:
        columns = options.get("columns") or list(data[0].keys())
        return go.Figure(
            go.Table(
                header=dict(values=columns),
                cells=dict(values=[[row.get(column, "") for row in data] for column in columns]),
            )
        )


def render_panel(panel: ReportPanel, renderer: Renderer) -> Any:
    options = {"title": panel.title, **panel.options}
    return renderer.render(panel.kind, panel.data, options)
