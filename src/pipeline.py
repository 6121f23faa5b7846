"""
Define el pipeline óptico, que orquesta la secuencia de pasos aplicados a
cada fotograma.
"""
import logging
import time
from typing import Any, Dict, List, Optional

from src.domain import CameraCalibration
from src.nodes.base import PipelineNode
from src.nodes.optics import IntrinsicsAnalyzerNode, MetricsFormatterNode
from src.nodes.presentation import PresentationSink, PresentationSinkNode


class OpticsPipeline:
    """
    Orquesta la ejecución de la secuencia de análisis de un fotograma.

    Se instancia una vez al inicio del servicio (ver `main.py`) con la
    calibración del perfil activo y el sink de presentación, y se reutiliza
    para cada lectura recibida por el Worker.
    """
    def __init__(self,
                 calibration: CameraCalibration,
                 sink: Optional[PresentationSink] = None):
        """
        Args:
            calibration (CameraCalibration): Calibración fija del sensor.
            sink (PresentationSink): Callable que recibe las etiquetas
                formateadas. Si es None se usa el log.
        """
        self.calibration = calibration
        self.sink = sink

        self.nodes: List[PipelineNode] = self._build_pipeline()
        logging.info("Pipeline óptico construido con %d nodos.", len(self.nodes))

    def _build_pipeline(self) -> List[PipelineNode]:
        """
        Define la secuencia de pasos de procesamiento. El orden en esta lista
        define el flujo de ejecución.
        """
        return [
            # 1. Derivar distancias focales, campo de visión y distancia al sujeto.
            IntrinsicsAnalyzerNode(
                calibration=self.calibration,
                name="Intrinsics"
            ),
            # 2. Formatear las métricas con dos decimales.
            MetricsFormatterNode(name="Formatter"),
            # 3. Entregar las etiquetas a la capa de presentación.
            PresentationSinkNode(
                sink=self.sink,
                name="Presentation"
            )
        ]

    def run(self, initial_context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Ejecuta la secuencia completa de nodos sobre un contexto dado.

        Args:
            initial_context (Dict[str, Any]): Contexto inicial del fotograma.
                Debe contener como mínimo la clave 'intrinsic_sample'.

        Returns:
            Dict[str, Any]: El contexto final con los resultados de todos los
            nodos y los tiempos de ejecución.

        Raises:
            Exception: Si cualquier nodo falla, la excepción se propaga hacia
                arriba para ser gestionada por el Worker.
        """
        context = initial_context.copy()
        context['execution_times'] = {}

        frame_id = context.get('frame_id', f"frame_{time.time_ns()}")
        logging.debug(">>> Procesando fotograma: %s", frame_id)

        total_start_time = time.perf_counter()

        for node in self.nodes:
            node_start_time = time.perf_counter()
            try:
                context = node.run(context)
                context['execution_times'][node.name] = time.perf_counter() - node_start_time

            except Exception as e:
                logging.error(
                    "!!! Error en nodo '%s' (Fotograma: %s): %s",
                    node.name, frame_id, e, exc_info=True
                )
                raise

        total_duration = time.perf_counter() - total_start_time
        context['execution_times']['total_pipeline'] = total_duration

        logging.debug("<<< Fotograma %s procesado en %.6f segundos.", frame_id, total_duration)

        return context
