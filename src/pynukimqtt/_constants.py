"""Internal constants shared across the library."""

DEFAULT_BASE_TOPIC = "nuki"
DEFAULT_DEVICE_ID = "45A2F2BF"

DEFAULT_MQTT_PORT = 1883
DEFAULT_MQTT_TLS_PORT = 8883
DEFAULT_MQTT_KEEPALIVE = 60

# ------------------------------------------------------------------
# Topic suffixes published by the lock (Nuki MQTT API)
# ------------------------------------------------------------------

SUFFIX_LOCK_STATE = "lockState"
SUFFIX_CONNECTED = "connected"
SUFFIX_BATTERY_CHARGE_STATE = "batteryChargeState"
SUFFIX_BATTERY_CRITICAL = "batteryCritical"
SUFFIX_BATTERY_CHARGING = "batteryCharging"
SUFFIX_KEYPAD_BATTERY_CRITICAL = "keypadBatteryCritical"
SUFFIX_DOOR_SENSOR_STATE = "doorsensorState"
SUFFIX_FIRMWARE = "firmware"
SUFFIX_LOCK_ACTION_EVENT = "lockActionEvent"

# Command topic consumed by the lock.
SUFFIX_LOCK_ACTION = "lockAction"

# Literal the lock sends for boolean ``true``; everything else is false.
TRUE_LITERAL = "true"

# Characters that may not appear inside a topic segment we build ourselves.
MQTT_WILDCARDS: frozenset[str] = frozenset({"+", "#"})
