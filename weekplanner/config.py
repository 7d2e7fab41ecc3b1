import os
from dotenv import load_dotenv

load_dotenv()

# Travel time lookups (Google Distance Matrix)
GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY", "")
DISTANCE_MATRIX_URL = os.getenv(
    "DISTANCE_MATRIX_URL", "https://maps.googleapis.com/maps/api/distancematrix/json"
)
TRAVEL_MODE = os.getenv("TRAVEL_MODE", "walking")
TRAVEL_TIME_TIMEOUT_SECONDS = float(os.getenv("TRAVEL_TIME_TIMEOUT_SECONDS", "10"))

# Scheduling
SCHEDULER_TIMEZONE = os.getenv("SCHEDULER_TIMEZONE", "UTC")

# Server
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
