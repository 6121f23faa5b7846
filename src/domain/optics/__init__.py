from .analyzer import compute_metrics, field_of_view, subject_distance
from .formatting import format_distance, format_metrics

__all__ = [
    "compute_metrics",
    "field_of_view",
    "subject_distance",
    "format_distance",
    "format_metrics",
]
