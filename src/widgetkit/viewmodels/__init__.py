from .checkbox_list_viewmodel import CheckBoxListViewModel, CheckBoxRow  # noqa: F401
from .donut_chart_viewmodel import DonutChartViewModel  # noqa: F401
