"""PyQt6 widgets for the selection and chart view models.

Importing this package requires PyQt6; the engines and view models do not.
"""

from .checkbox_list import CheckBoxListWidget  # noqa: F401
from .donut_chart import DonutChartWidget  # noqa: F401
