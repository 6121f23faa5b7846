from .camera import (RESOLUTION_PROFILES, CameraCalibration, IntrinsicSample, as_dimension,
                     ResolutionProfile, build_intrinsic_matrix, matrix_from_rows)
from .optics import OpticsMetrics
