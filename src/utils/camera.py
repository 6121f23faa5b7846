import logging
from typing import Optional

from config.settings import PIXEL_SIZE, REFERENCE_FOCAL_LENGTH, RESOLUTION_PROFILE
from src.domain.schemas.camera import (RESOLUTION_PROFILES, CameraCalibration,
                                       ResolutionProfile)


def get_resolution_profile(name: str) -> ResolutionProfile:
    profile = RESOLUTION_PROFILES.get(name)
    if profile is None:
        raise ValueError(
            f"Perfil de resolución desconocido '{name}'. Disponibles: {sorted(RESOLUTION_PROFILES)}"
        )
    return profile


def load_camera_calibration(profile_name: str = RESOLUTION_PROFILE,
                            pixel_size: Optional[str] = PIXEL_SIZE,
                            reference_focal_length: Optional[str] = REFERENCE_FOCAL_LENGTH) -> CameraCalibration:
    """
    Retorna la calibración del perfil configurado, aplicando las
    sobrescrituras de tamaño de píxel y distancia focal de referencia.
    """
    base = get_resolution_profile(profile_name).calibration
    calibration = CameraCalibration(
        pixel_size_meters=float(pixel_size) if pixel_size else base.pixel_size_meters,
        reference_focal_length_pixels=(
            float(reference_focal_length) if reference_focal_length
            else base.reference_focal_length_pixels
        )
    )
    logging.info("Calibración '%s': pixel=%g m, focal de referencia=%.2f px",
                 profile_name, calibration.pixel_size_meters, calibration.reference_focal_length_pixels)
    return calibration
