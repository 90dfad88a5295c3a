"""
unifi-block - API Endpoint Constants

This module contains the UniFi controller API endpoints and wire constants.
Endpoints are relative to the configured controller base URL.
"""

# Authentication
API_LOGIN = "/api/login"

# Station manager, needs .format(site=...)
API_STATION_MANAGER = "/api/s/{site}/cmd/stamgr"

# Station manager command keywords
CMD_BLOCK_STATION = "block-sta"
CMD_UNBLOCK_STATION = "unblock-sta"

# Request headers
# The controller parses the JSON body regardless of the declared content type.
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
ACCEPT_ENCODING_IDENTITY = "identity"
USER_AGENT = "unifi-block/1.0"

# Headers never written to the log
SENSITIVE_HEADERS = ["authorization", "cookie", "set-cookie"]

# MAC address shape
MAC_ADDRESS_SEPARATOR = ":"
MAC_ADDRESS_SEGMENTS = 6
MAC_ADDRESS_SEGMENT_MAX = 0xFF

# Environment variables for credential overrides
ENV_USER = "UNIFI_USER"
ENV_PASSWORD = "UNIFI_PASSWORD"

# Logging
LOGGER_NAME = "unifi-block"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
