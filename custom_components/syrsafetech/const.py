"""Constants for SYR SafeTech Connect integration."""
from typing import Final

DOMAIN: Final = "syrsafetech"
MANUFACTURER: Final = "SYR"
MODEL: Final = "SafeTech Connect"

# Configuration
CONF_HOST: Final = "host"

# Update interval
UPDATE_INTERVAL: Final = 60  # seconds

# Local API
API_PORT: Final = 5333
API_PATH: Final = "/safe-tec"
REQUEST_TIMEOUT: Final = 5  # seconds
ACK_OK: Final = "OK"

# Channels
CHANNEL_SHUTOFF: Final = "shutoff"
CHANNEL_SELECT_PROFILE: Final = "selectProfile"
CHANNEL_NUMBER_OF_PROFILES: Final = "numberOfProfiles"
CHANNEL_PROFILE_AVAILABILITY: Final = "profileAvailability"
CHANNEL_PROFILE_NAME: Final = "profileName"
CHANNEL_PROFILE_VOLUME_LEVEL: Final = "profileVolumeLevel"
CHANNEL_PROFILE_TIME_LEVEL: Final = "profileTimeLevel"
CHANNEL_PROFILE_MAX_FLOW: Final = "profileMaxFlow"
CHANNEL_PROFILE_RETURN_TIME: Final = "profileReturnTime"
CHANNEL_PROFILE_MICROLEAKAGE: Final = "profileMicroleakage"
CHANNEL_PROFILE_BUZZER_ON: Final = "profileBuzzerOn"
CHANNEL_PROFILE_LEAKAGE_WARNING_ON: Final = "profileLeakageWarningOn"

# Mnemonics
MNEMONIC_SHUTOFF: Final = "AB"
MNEMONIC_SELECTED_PROFILE: Final = "PRF"
MNEMONIC_PROFILE_COUNT: Final = "PRn"
MNEMONIC_PROFILE_AVAILABILITY: Final = "PA"
MNEMONIC_PROFILE_NAME: Final = "PN"

# Profile attribute codes, each suffixed with the profile index
PROFILE_VOLUME_LEVEL: Final = "PV"
PROFILE_TIME_LEVEL: Final = "PT"
PROFILE_MAX_FLOW: Final = "PF"
PROFILE_RETURN_TIME: Final = "PR"
PROFILE_MICROLEAKAGE: Final = "PM"
PROFILE_BUZZER_ON: Final = "PB"
PROFILE_LEAKAGE_WARNING_ON: Final = "PW"

# Channel -> profile attribute code, in refresh order
PROFILE_ATTRIBUTE_CHANNELS: Final = {
    CHANNEL_PROFILE_VOLUME_LEVEL: PROFILE_VOLUME_LEVEL,
    CHANNEL_PROFILE_TIME_LEVEL: PROFILE_TIME_LEVEL,
    CHANNEL_PROFILE_MAX_FLOW: PROFILE_MAX_FLOW,
    CHANNEL_PROFILE_RETURN_TIME: PROFILE_RETURN_TIME,
    CHANNEL_PROFILE_MICROLEAKAGE: PROFILE_MICROLEAKAGE,
    CHANNEL_PROFILE_BUZZER_ON: PROFILE_BUZZER_ON,
    CHANNEL_PROFILE_LEAKAGE_WARNING_ON: PROFILE_LEAKAGE_WARNING_ON,
}

BOOLEAN_CHANNELS: Final = frozenset(
    {
        CHANNEL_PROFILE_MICROLEAKAGE,
        CHANNEL_PROFILE_BUZZER_ON,
        CHANNEL_PROFILE_LEAKAGE_WARNING_ON,
    }
)

# Shutoff states
SHUTOFF_OPEN: Final = 1
SHUTOFF_CLOSED: Final = 2
SHUTOFF_STATES: Final = (SHUTOFF_OPEN, SHUTOFF_CLOSED)

# Profiles
PROFILE_MIN: Final = 1
PROFILE_MAX: Final = 8
PROFILE_ACTIVE: Final = 1
PROFILE_INACTIVE: Final = 0

# Parse sentinels
INVALID_INT: Final = -1
INVALID_TEXT: Final = ""
