"""Forms for chart request workflows."""

from __future__ import annotations

from django import forms

from analysis.dataset import AxisSelection
from analysis.kinds import ChartKind
from core.charting.schema import ChartRequest

CHART_TYPE_CHOICES = (
    (ChartKind.bar.value, "Bar Chart"),
    (ChartKind.line.value, "Line Chart"),
    (ChartKind.pie.value, "Pie Chart"),
    (ChartKind.scatter.value, "Scatter Plot"),
    (ChartKind.bar_3d.value, "3D Bar Chart"),
    (ChartKind.scatter_3d.value, "3D Scatter Plot"),
    (ChartKind.surface_3d.value, "3D Surface Plot"),
)


class ChartRequestForm(forms.Form):
    """Validate axis and chart-type selections against a sheet's columns.

    Axes are optional at the form level: an unset axis is reported by the chart
    engine as a MissingAxisSelection error so the UI can prompt for it. An axis
    naming a column that is not in the sheet is a form error.
    """

    chart_type = forms.ChoiceField(required=True, choices=CHART_TYPE_CHOICES, label="Chart Type")
    x_axis = forms.ChoiceField(required=False, choices=(), label="X-Axis")
    y_axis = forms.ChoiceField(required=False, choices=(), label="Y-Axis")
    z_axis = forms.CharField(required=False, label="Z-Axis")
    dark = forms.BooleanField(required=False, label="Dark mode")

    def __init__(self, *args, **kwargs) -> None:
        """Initialize axis choices from the sheet's column names.

        Keyword Args:
            fields: Ordered column names available for the axes.
        """

        fields: tuple[str, ...] = tuple(kwargs.pop("fields", ()))
        super().__init__(*args, **kwargs)
        self.sheet_fields = fields

        for name, placeholder in (("x_axis", "Select X-axis"), ("y_axis", "Select Y-axis")):
            self.fields[name].choices = [("", placeholder)] + [(column, column) for column in fields]

    def clean(self) -> dict[str, object]:
        """Ignore the Z axis for 2D chart kinds and check it against the sheet for 3D."""

        cleaned = super().clean()
        chart_type = cleaned.get("chart_type")
        if not chart_type:
            return cleaned

        z_axis = (cleaned.get("z_axis") or "").strip()
        if not ChartKind(str(chart_type)).is_3d:
            cleaned["z_axis"] = ""
        elif z_axis and z_axis not in self.sheet_fields:
            self.add_error("z_axis", f"Select a valid choice. {z_axis} is not one of the available choices.")
        else:
            cleaned["z_axis"] = z_axis
        return cleaned

    def chart_request(self, *, file_name: str | None = None) -> ChartRequest:
        """Return a typed ChartRequest from validated form values.

        Raises:
            ValueError: If the form is invalid.
        """

        if not self.is_valid():
            raise ValueError("ChartRequestForm must be valid before building a chart request.")

        return ChartRequest(
            chart_type=ChartKind(str(self.cleaned_data["chart_type"])),
            selection=AxisSelection(
                x=self.cleaned_data.get("x_axis") or None,
                y=self.cleaned_data.get("y_axis") or None,
                z=self.cleaned_data.get("z_axis") or None,
            ),
            dark=bool(self.cleaned_data.get("dark") or False),
            file_name=file_name,
        )
