"""
Cálculo de magnitudes ópticas a partir de la matriz intrínseca de la cámara.

Todas las funciones son puras: no guardan estado, no realizan I/O y pueden
invocarse en paralelo desde cualquier hilo.
"""
from typing import Optional

import numpy as np

from src.domain.schemas.camera import CameraCalibration, IntrinsicSample
from src.domain.schemas.optics import OpticsMetrics


def field_of_view(extent_pixels: float, focal_length_pixels: float) -> float:
    """
    Calcula el campo de visión (en grados) a lo largo de un eje.

    Fórmula: atan((extent / 2) / focal) * (180 / pi) * 2

    Una distancia focal nula no es un error: la división se evalúa en punto
    flotante IEEE y el resultado es el valor límite de 180°.
    """
    with np.errstate(divide='ignore'):
        ratio = (np.float64(extent_pixels) / 2.0) / np.float64(focal_length_pixels)
    return float(np.arctan(ratio) * (180.0 / np.pi) * 2.0)


def subject_distance(reference_focal_length: float,
                     current_focal_length: float,
                     pixel_size_meters: float) -> Optional[float]:
    """
    Estima la distancia al sujeto con la ecuación de lente delgada.

    Con `f` la distancia focal con foco en infinito y `b` la distancia focal
    actual (ambas en píxeles):
        a = 1 / (1/f - 1/b)          (distancia al objeto en píxeles)
        distancia = a * pixel_size   (metros)

    El signo se conserva tal cual lo entrega la fórmula.

    Returns:
        Optional[float]: Distancia en metros, o `None` si `f == 0`, `b == 0`
        o `f == b` (lente en infinito o datos degenerados).
    """
    f = float(reference_focal_length)
    b = float(current_focal_length)
    if f == 0.0 or b == 0.0 or f == b:
        return None

    denominator = 1.0 / f - 1.0 / b
    # f y b tan cercanos que sus inversos coinciden en punto flotante
    if denominator == 0.0:
        return None

    a = 1.0 / denominator
    return a * float(pixel_size_meters)


def compute_metrics(sample: IntrinsicSample, calibration: CameraCalibration) -> OpticsMetrics:
    """
    Deriva las métricas ópticas de una lectura de parámetros intrínsecos.

    La matriz se interpreta en el layout columna mayor de la plataforma,
    `[[fx, 0, 0], [0, fy, 0], [cx, cy, 1]]`.

    Args:
        sample (IntrinsicSample): Lectura del fotograma, ya validada.
        calibration (CameraCalibration): Calibración del perfil activo.

    Returns:
        OpticsMetrics: Métricas derivadas. Nunca lanza excepciones por datos
        degenerados; la distancia desconocida se reporta como `None`.
    """
    matrix = sample.matrix
    h_focal = float(matrix[0][0])
    v_focal = float(matrix[1][1])

    return OpticsMetrics(
        image_width=sample.image_width,
        image_height=sample.image_height,
        lens_position=float(sample.lens_position),
        h_focal_length=h_focal,
        v_focal_length=v_focal,
        h_image_center=float(matrix[2][0]),
        v_image_center=float(matrix[2][1]),
        h_fov=field_of_view(sample.image_width, h_focal),
        v_fov=field_of_view(sample.image_height, v_focal),
        subject_distance=subject_distance(
            calibration.reference_focal_length_pixels,
            h_focal,
            calibration.pixel_size_meters
        )
    )
