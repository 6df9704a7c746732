from .note import Note
from .chart_data import ChartData
from .chart_factory import ChartFactory
from .chart import Chart

__all__ = ["Note", "ChartData", "ChartFactory", "Chart"]
