"""
Cola acotada de fotogramas entre el productor (la cámara o un replay) y el
Worker que ejecuta el pipeline óptico.

Orden FIFO. Cuando la cola está llena se descarta el fotograma más antiguo
para acotar la latencia; no hay garantía de entrega exactamente una vez.
"""
import logging
import threading
from collections import deque
from typing import Any, Optional


class FrameQueue:
    def __init__(self, maxsize: int = 4):
        if maxsize <= 0:
            raise ValueError(f"maxsize debe ser positivo, se recibió {maxsize}")

        self.maxsize = maxsize
        self.dropped = 0
        self._frames = deque(maxlen=maxsize)
        self._cond = threading.Condition()
        self._closed = False

    def put(self, frame: Any) -> bool:
        """
        Encola un fotograma sin bloquear.

        Returns:
            bool: False si se descartó el fotograma más antiguo para hacer sitio.
        """
        with self._cond:
            if self._closed:
                raise RuntimeError("No se puede encolar en una FrameQueue cerrada.")

            accepted_without_drop = len(self._frames) < self.maxsize
            if not accepted_without_drop:
                self.dropped += 1
                logging.debug("Cola llena (%d). Se descarta el fotograma más antiguo.", self.maxsize)

            # deque con maxlen expulsa el elemento más antiguo
            self._frames.append(frame)
            self._cond.notify()
            return accepted_without_drop

    def get(self, timeout: Optional[float] = None) -> Optional[Any]:
        """
        Retorna el fotograma más antiguo, o None si se agota el tiempo de
        espera o la cola está cerrada y vacía.
        """
        with self._cond:
            if not self._frames and not self._closed:
                self._cond.wait_for(lambda: self._frames or self._closed, timeout=timeout)
            if self._frames:
                return self._frames.popleft()
            return None

    def close(self):
        """Marca la cola como cerrada y despierta a los consumidores en espera."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    @property
    def closed(self) -> bool:
        return self._closed

    def drained(self) -> bool:
        with self._cond:
            return self._closed and not self._frames

    def __len__(self) -> int:
        with self._cond:
            return len(self._frames)
