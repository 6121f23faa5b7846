import os
from dotenv import load_dotenv

load_dotenv()

RESOLUTION_PROFILE = os.getenv("resolution_profile", "wide_hd")

# Sobrescriben la calibración del perfil si están definidas.
PIXEL_SIZE = os.getenv("pixel_size")
REFERENCE_FOCAL_LENGTH = os.getenv("reference_focal_length")

FRAME_QUEUE_SIZE = int(os.getenv("frame_queue_size", "4"))
FRAME_WAIT_TIME = float(os.getenv("frame_wait_time", "0.5"))

FRAMES_PATH = os.getenv("frames_path")

LOG_LEVEL = os.getenv("log_level", "INFO")
