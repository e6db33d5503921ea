"""Constants for the MVG bgw-pt API."""

MVG_API_BASE_URL = "https://www.mvg.de/api/bgw-pt/v3"
DEPARTURES_PATH = "/departures"
LOCATIONS_PATH = "/locations"

DEFAULT_HEADERS = {
    "accept": "application/json",
    "user-agent": "Mozilla/5.0",
}
