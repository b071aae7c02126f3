"""Default values that are not part of the validated schema."""

APP_ID_ENV_VAR = "OPENWEATHER_APP_ID"
DEFAULT_CONFIG_PATH = "ops/configs/default.yaml"
EMPTY_CITY_ALERT = "Enter city Name"
PROVIDER_ERROR_FALLBACK = "Error fetching forecast data"
TRANSPORT_ERROR_MESSAGE = "Error in fetching weather data"
