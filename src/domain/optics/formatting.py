"""
Formato de texto de las métricas ópticas para la capa de presentación.

Todos los valores numéricos se muestran con exactamente dos decimales.
"""
from src.domain.schemas.optics import OpticsMetrics

UNKNOWN_DISTANCE = "-"


def dot2f(value: float) -> str:
    return f"{value:.2f}"


def format_metrics(metrics: OpticsMetrics) -> str:
    """Genera el texto multilínea con la lectura completa del fotograma."""
    lines = [
        "■Distancia focal [px]",
        f" h[{dot2f(metrics.h_focal_length)}]",
        f" v[{dot2f(metrics.v_focal_length)}]",
        "■Tamaño de imagen / centro de imagen [px]",
        f" h[{metrics.image_width}]/[{dot2f(metrics.h_image_center)}]",
        f" v[{metrics.image_height}]/[{dot2f(metrics.v_image_center)}]",
        "■Posición del lente",
        f" [{dot2f(metrics.lens_position)}] *0.0~1.0 (infinito)",
        "■Campo de visión",
        f" h[{dot2f(metrics.h_fov)}]°",
        f" v[{dot2f(metrics.v_fov)}]°",
    ]
    return "\n".join(lines)


def format_distance(metrics: OpticsMetrics) -> str:
    """Distancia al sujeto como 'X.XXm', o '-' si es desconocida."""
    if metrics.subject_distance is None:
        return UNKNOWN_DISTANCE
    return f"{dot2f(metrics.subject_distance)}m"
