from .camera import get_resolution_profile, load_camera_calibration
from .frames import read_frames
