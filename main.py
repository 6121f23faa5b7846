
import logging
import sys
import threading

from config.settings import FRAME_QUEUE_SIZE, FRAME_WAIT_TIME, FRAMES_PATH, LOG_LEVEL
from src.frames import FrameQueue
from src.pipeline import OpticsPipeline
from src.utils import load_camera_calibration, read_frames
from src.worker import Worker

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)


def produce_frames(path: str, frame_queue: FrameQueue):
    """Encola las lecturas grabadas y cierra la cola al terminar."""
    try:
        for payload in read_frames(path):
            frame_queue.put(payload)
    except OSError as e:
        logging.error(f"No se pudo leer el archivo de lecturas '{path}': {e}")
    finally:
        frame_queue.close()


if __name__ == "__main__":
    logging.info(">>> Iniciando servicio de parámetros intrínsecos...")

    frames_path = sys.argv[1] if len(sys.argv) > 1 else FRAMES_PATH
    if not frames_path:
        logging.error("La variable de entorno 'frames_path' no está definida y no se indicó archivo. El servicio no puede iniciar.")
        sys.exit(1)

    worker = None
    try:
        calibration = load_camera_calibration()
        frame_queue = FrameQueue(maxsize=FRAME_QUEUE_SIZE)
        pipeline = OpticsPipeline(calibration=calibration)

        worker = Worker(
            frame_queue=frame_queue,
            pipeline=pipeline,
            max_wait_time=FRAME_WAIT_TIME
        )

        producer = threading.Thread(
            target=produce_frames,
            args=(frames_path, frame_queue),
            name="FrameProducer",
            daemon=True
        )
        producer.start()

        worker.start()

    except KeyboardInterrupt:
        logging.warning("\nInterrupción manual detectada. Finalizando servicio...")
        if worker:
            worker.stop()
        logging.info("Servicio detenido limpiamente.")

    except Exception as e:
        logging.critical(f"Error fatal en el ciclo principal: {e}", exc_info=True)
        if worker:
            worker.stop()
        sys.exit(1)
