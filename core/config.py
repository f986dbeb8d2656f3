import os
from dotenv import load_dotenv
load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
IMAGE_WIDTH = int(os.getenv("CAMO_IMAGE_WIDTH", "800"))
IMAGE_HEIGHT = int(os.getenv("CAMO_IMAGE_HEIGHT", "200"))
NOISE_SPAN = int(os.getenv("CAMO_NOISE_SPAN", "30"))
