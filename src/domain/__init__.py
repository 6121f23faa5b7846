from .schemas import (RESOLUTION_PROFILES, CameraCalibration, IntrinsicSample,
                      OpticsMetrics, ResolutionProfile, build_intrinsic_matrix)
