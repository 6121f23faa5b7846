"""
Define los esquemas de datos para la calibración de la cámara y la lectura
de parámetros intrínsecos de cada fotograma.
"""
from dataclasses import dataclass
from typing import Any, Dict, Sequence

import numpy as np


@dataclass(frozen=True)
class CameraCalibration:
    """
    Almacena la calibración fija del sensor para un perfil de resolución.

    Esta estructura de datos es inmutable y se fija al momento de configurar
    el servicio. Es la referencia que usa `compute_metrics` para estimar la
    distancia al sujeto a partir del desplazamiento de la distancia focal.

    Attributes:
        pixel_size_meters (float): Tamaño de un píxel del sensor en metros.
        reference_focal_length_pixels (float): Distancia focal en píxeles con
            el foco en el infinito, calibrada empíricamente por dispositivo y
            resolución.
    """
    pixel_size_meters: float
    reference_focal_length_pixels: float


@dataclass(frozen=True)
class ResolutionProfile:
    """
    Perfil de captura: resolución de la sesión y su calibración asociada.

    Attributes:
        name (str): Identificador del perfil (e.g., 'wide_hd').
        preset (str): Preset de captura de la plataforma (e.g., 'hd1920x1080').
        width (int): Ancho de imagen en píxeles.
        height (int): Alto de imagen en píxeles.
        calibration (CameraCalibration): Calibración del sensor para el perfil.
    """
    name: str
    preset: str
    width: int
    height: int
    calibration: CameraCalibration


# Valores medidos sobre un iPhone 12 Pro (cámara gran angular).
RESOLUTION_PROFILES: Dict[str, ResolutionProfile] = {
    "wide_hd": ResolutionProfile(
        name="wide_hd",
        preset="hd1920x1080",
        width=1920,
        height=1080,
        calibration=CameraCalibration(
            pixel_size_meters=0.00000337492,
            reference_focal_length_pixels=1383.95
        )
    ),
    "wide_4k": ResolutionProfile(
        name="wide_4k",
        preset="hd4K3840x2160",
        width=3840,
        height=2160,
        calibration=CameraCalibration(
            pixel_size_meters=0.00000455051,
            reference_focal_length_pixels=2724.43
        )
    ),
}


def build_intrinsic_matrix(fx: float, fy: float, cx: float, cy: float) -> np.ndarray:
    """
    Construye una matriz intrínseca en el layout entregado por la plataforma,
    `[[fx, 0, 0], [0, fy, 0], [cx, cy, 1]]` (columna mayor).
    """
    return np.array([
        [fx, 0.0, 0.0],
        [0.0, fy, 0.0],
        [cx, cy, 1.0]
    ], dtype=np.float64)


@dataclass(frozen=True)
class IntrinsicSample:
    """
    Lectura de parámetros intrínsecos de un único fotograma.

    Se crea por fotograma y se descarta una vez derivadas las métricas; no se
    guarda historial.

    Attributes:
        image_width (int): Ancho de la imagen en píxeles (> 0).
        image_height (int): Alto de la imagen en píxeles (> 0).
        matrix (np.ndarray): Matriz intrínseca 3x3 en layout columna mayor.
        lens_position (float): Posición normalizada del lente, de 0.0
            (enfoque más cercano) a 1.0 (infinito).
    """
    image_width: int
    image_height: int
    matrix: np.ndarray
    lens_position: float

    def validate(self) -> "IntrinsicSample":
        """Rechaza lecturas con dimensiones no positivas o matriz mal formada."""
        as_dimension(self.image_width, "image_width")
        as_dimension(self.image_height, "image_height")
        if np.shape(self.matrix) != (3, 3):
            raise ValueError(f"La matriz intrínseca debe ser 3x3, se recibió {np.shape(self.matrix)}")
        return self

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "IntrinsicSample":
        """
        Construye y valida una lectura a partir de un diccionario (e.g., una
        línea JSON grabada desde el dispositivo).

        Args:
            payload (Dict[str, Any]): Debe contener 'image_width', 'image_height',
                'matrix' (lista 3x3) y opcionalmente 'lens_position'.

        Raises:
            ValueError: Si faltan claves o los valores no son válidos.
        """
        missing = [k for k in ("image_width", "image_height", "matrix") if k not in payload]
        if missing:
            raise ValueError(f"Lectura sin claves requeridas {missing}. Keys: {list(payload.keys())}")

        try:
            matrix = matrix_from_rows(payload["matrix"])
            sample = cls(
                image_width=as_dimension(payload["image_width"], "image_width"),
                image_height=as_dimension(payload["image_height"], "image_height"),
                matrix=matrix,
                lens_position=float(payload.get("lens_position", 0.0))
            )
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"Lectura mal formada: {e}") from e

        return sample.validate()


def as_dimension(value: Any, name: str) -> int:
    """
    Convierte una dimensión de imagen a entero positivo.

    Acepta enteros y flotantes sin parte fraccionaria (JSON puede entregar
    1920.0). Rechaza booleanos, valores no numéricos, no finitos o con
    decimales.

    Raises:
        ValueError: Si el valor no es una dimensión válida.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise ValueError(f"Dimensión '{name}' no numérica: {value!r}")
    if isinstance(value, (float, np.floating)):
        if not np.isfinite(value):
            raise ValueError(f"Dimensión '{name}' no finita: {value!r}")
        if not float(value).is_integer():
            raise ValueError(f"Dimensión '{name}' no entera: {value!r}")
    if value <= 0:
        raise ValueError(f"Dimensión '{name}' debe ser positiva: {value!r}")
    return int(value)


def matrix_from_rows(rows: Sequence[Sequence[float]]) -> np.ndarray:
    """Convierte una lista anidada 3x3 en una matriz intrínseca de NumPy."""
    matrix = np.asarray(rows, dtype=np.float64)
    if matrix.shape != (3, 3):
        raise ValueError(f"La matriz intrínseca debe ser 3x3, se recibió {matrix.shape}")
    return matrix
