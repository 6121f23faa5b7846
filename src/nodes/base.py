"""
Interfaz común de los pasos que se aplican a cada fotograma.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict


class PipelineNode(ABC):
    """
    Paso atómico del tratamiento de un fotograma.

    Los nodos se comunican a través de un diccionario de contexto: cada uno
    lee las claves que necesita (e.g., `intrinsic_sample`), escribe las suyas
    (e.g., `optics_metrics`) y retorna el mismo diccionario al `OpticsPipeline`.

    Attributes:
        name (str): Nombre del nodo, usado en logs y en `execution_times`.
    """
    def __init__(self, name: str):
        self.name = name

    def require(self, context: Dict[str, Any], key: str) -> Any:
        """
        Retorna `context[key]`.

        Raises:
            ValueError: Si la clave falta o su valor es None.
        """
        value = context.get(key)
        if value is None:
            raise ValueError(f"[{self.name}] '{key}' no encontrada en el contexto.")
        return value

    @abstractmethod
    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """Procesa el fotograma descrito en `context` y retorna el contexto actualizado."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
