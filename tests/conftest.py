import sys
from pathlib import Path

import pytest

# Add repository root to sys.path so 'src' and 'config' can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.domain import CameraCalibration, IntrinsicSample, build_intrinsic_matrix  # noqa: E402


@pytest.fixture
def calibration():
    return CameraCalibration(pixel_size_meters=0.00000337492, reference_focal_length_pixels=1383.95)


@pytest.fixture
def make_sample():
    def _make(fx=1000.0, fy=1000.0, cx=960.0, cy=540.0, width=1920, height=1080, lens_position=0.5):
        return IntrinsicSample(
            image_width=width,
            image_height=height,
            matrix=build_intrinsic_matrix(fx, fy, cx, cy),
            lens_position=lens_position
        )
    return _make
