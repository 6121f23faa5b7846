import logging
import threading
from typing import Any, Dict, Optional, Union

from src.domain import IntrinsicSample
from src.frames import FrameQueue
from src.pipeline import OpticsPipeline

Frame = Union[IntrinsicSample, Dict[str, Any]]


class Worker:
    def __init__(self,
                 frame_queue: FrameQueue,
                 pipeline: OpticsPipeline,
                 max_wait_time: float = 0.5):

        self.logger = logging.getLogger(__name__)

        if not self.logger.hasHandlers() and not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

        self.frame_queue = frame_queue
        self.pipeline = pipeline
        self.max_wait_time = max_wait_time
        self.is_running = False
        self._stop_requested = threading.Event()

        self.processed = 0
        self.rejected = 0
        self.failed = 0

    def start(self):
        """
        Inicia el ciclo de consumo de fotogramas.

        Termina cuando se llama a `stop()` o cuando la cola se cierra y queda vacía.
        """
        if self._stop_requested.is_set():
            self.logger.info("🛑 Parada solicitada antes de iniciar. El Worker no arranca.")
            return

        self.is_running = True
        self.logger.info(f"🚀 Worker iniciado. Cola de fotogramas (máx. {self.frame_queue.maxsize}).")

        try:
            while not self._stop_requested.is_set():
                frame = self.frame_queue.get(timeout=self.max_wait_time)

                if frame is None:
                    if self.frame_queue.drained():
                        self.logger.info("📭 Cola cerrada y vacía. No quedan fotogramas.")
                        break
                    continue

                self.process_frame(frame)

        except Exception as e:
            self.logger.critical(f"🔥 Error crítico en el Worker: {e}", exc_info=True)
            raise e

        finally:
            self.is_running = False
            self.logger.info(
                f"Worker finalizado. Procesados: {self.processed}, "
                f"rechazados: {self.rejected}, fallidos: {self.failed}, "
                f"descartados por cola llena: {self.frame_queue.dropped}."
            )

    def process_frame(self, frame: Frame) -> Optional[Dict[str, Any]]:
        """
        Lógica de procesamiento individual.

        Las lecturas inválidas se rechazan en la frontera y se descartan; los
        errores del pipeline se registran y el fotograma se pierde.
        """
        try:
            sample = self._to_sample(frame)
        except ValueError as e:
            self.rejected += 1
            self.logger.error(f"❌ Lectura inválida. Se descarta el fotograma: {e}")
            return None

        context = {
            "frame_id": self.processed + self.rejected + self.failed,
            "intrinsic_sample": sample
        }

        try:
            result = self.pipeline.run(context)
        except Exception as e:
            self.failed += 1
            self.logger.error(f"❌ Error procesando fotograma {context['frame_id']}: {e}", exc_info=True)
            return None

        self.processed += 1
        return result

    def _to_sample(self, frame: Frame) -> IntrinsicSample:
        if isinstance(frame, IntrinsicSample):
            return frame.validate()
        if isinstance(frame, dict):
            return IntrinsicSample.from_payload(frame)
        raise ValueError(f"Tipo de fotograma no soportado: {type(frame).__name__}")

    def stop(self):
        self.logger.info("🛑 Solicitud de parada recibida.")
        self._stop_requested.set()
        self.is_running = False
