"""
Nodos del pipeline para el análisis óptico de cada fotograma.

Este módulo contiene el nodo que deriva las métricas a partir de la matriz
intrínseca y el nodo que las convierte en texto para la capa de presentación.
"""
import logging
from typing import Any, Dict

from src.domain import CameraCalibration, IntrinsicSample
from src.domain.optics import compute_metrics, format_distance, format_metrics

from .base import PipelineNode


class IntrinsicsAnalyzerNode(PipelineNode):
    """
    Convierte una `IntrinsicSample` en `OpticsMetrics` usando la calibración
    del perfil de resolución activo.
    """
    def __init__(
        self,
        calibration: CameraCalibration,
        name: str = "intrinsics_analyzer"
    ):
        """
        Args:
            calibration (CameraCalibration): Calibración fija del sensor.
            name (str): Nombre del nodo.
        """
        super().__init__(name)
        self.calibration = calibration

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Context Inputs:
            - `intrinsic_sample` (IntrinsicSample): Lectura del fotograma.

        Context Outputs:
            - `optics_metrics` (OpticsMetrics): Métricas derivadas.
        """
        sample: IntrinsicSample = self.require(context, 'intrinsic_sample')

        metrics = compute_metrics(sample, self.calibration)
        context['optics_metrics'] = metrics

        if metrics.subject_distance is None:
            logging.debug("[%s] Distancia desconocida (f=%.2f, b=%.2f).", self.name,
                          self.calibration.reference_focal_length_pixels, metrics.h_focal_length)
        else:
            logging.debug("[%s] Distancia estimada: %.4f m.", self.name, metrics.subject_distance)
        return context


class MetricsFormatterNode(PipelineNode):
    """
    Formatea las métricas con dos decimales para mostrarlas al usuario.
    """
    def __init__(self, name: str = "metrics_formatter"):
        super().__init__(name)

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Context Inputs:
            - `optics_metrics` (OpticsMetrics): Salida del `IntrinsicsAnalyzerNode`.

        Context Outputs:
            - `metrics_label` (str): Texto multilínea con la lectura completa.
            - `distance_label` (str): Distancia como 'X.XXm' o '-'.
        """
        metrics = self.require(context, 'optics_metrics')

        context['metrics_label'] = format_metrics(metrics)
        context['distance_label'] = format_distance(metrics)
        return context
