import logging
from typing import Any, Callable, Dict, Optional

from src.nodes.base import PipelineNode

PresentationSink = Callable[[str, str], None]


def log_sink(metrics_label: str, distance_label: str) -> None:
    """Sink por defecto: vuelca las etiquetas al log."""
    logging.getLogger("presentation").info("%s\n■Distancia al sujeto\n %s", metrics_label, distance_label)


class PresentationSinkNode(PipelineNode):
    """
    Nodo que entrega las etiquetas formateadas a la capa de presentación
    (una vista, una consola o cualquier callable con la firma
    `sink(metrics_label, distance_label)`).
    """

    def __init__(self,
                 sink: Optional[PresentationSink] = None,
                 label_key: str = "metrics_label",
                 distance_key: str = "distance_label",
                 name: str = "presentation_sink"):
        super().__init__(name)
        self.sink = sink or log_sink
        self.label_key = label_key
        self.distance_key = distance_key
        self.logger = logging.getLogger(name)

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        metrics_label = context.get(self.label_key)
        distance_label = context.get(self.distance_key)

        if metrics_label is None or distance_label is None:
            self.logger.warning(f"⚠️ No hay etiquetas en '{self.label_key}'/'{self.distance_key}'. Se omite entrega.")
            return context

        try:
            self.sink(metrics_label, distance_label)
        except Exception as e:
            self.logger.error(f"❌ Error entregando etiquetas a la presentación: {e}", exc_info=True)
            raise

        return context
