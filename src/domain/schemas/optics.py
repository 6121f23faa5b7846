"""
Define el esquema de datos con las magnitudes ópticas derivadas de una
lectura de parámetros intrínsecos.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OpticsMetrics:
    """
    Resultado de `compute_metrics` para un fotograma.

    Es una vista de solo lectura sobre una `IntrinsicSample` y la
    `CameraCalibration` activa. Los casos degenerados se representan como
    datos y nunca como excepciones.

    Attributes:
        image_width (int): Ancho de la imagen en píxeles.
        image_height (int): Alto de la imagen en píxeles.
        lens_position (float): Posición normalizada del lente (0.0 a 1.0).
        h_focal_length (float): Distancia focal horizontal en píxeles.
        v_focal_length (float): Distancia focal vertical en píxeles.
        h_image_center (float): Centro de imagen horizontal en píxeles.
        v_image_center (float): Centro de imagen vertical en píxeles.
        h_fov (float): Campo de visión horizontal en grados.
        v_fov (float): Campo de visión vertical en grados.
        subject_distance (Optional[float]): Distancia estimada al sujeto en
            metros, o `None` si es desconocida (foco en infinito o datos
            degenerados).
    """
    image_width: int
    image_height: int
    lens_position: float
    h_focal_length: float
    v_focal_length: float
    h_image_center: float
    v_image_center: float
    h_fov: float
    v_fov: float
    subject_distance: Optional[float] = None

    @property
    def distance_known(self) -> bool:
        return self.subject_distance is not None
