"""Property names and technology identifiers used by the network manager.

Values mirror the key names the system network-management service uses in
its property dictionaries.
"""

from __future__ import annotations

# ------------------------------------------------------------------
# Manager properties
# ------------------------------------------------------------------

MANAGER_SERVICES = "Services"
MANAGER_DEVICES = "Devices"
MANAGER_AVAILABLE_TECHNOLOGIES = "AvailableTechnologies"
MANAGER_ENABLED_TECHNOLOGIES = "EnabledTechnologies"

# ------------------------------------------------------------------
# Shared entity properties
# ------------------------------------------------------------------

PROP_NAME = "Name"
PROP_TYPE = "Type"

# ------------------------------------------------------------------
# Service properties
# ------------------------------------------------------------------

PROP_STATE = "State"
PROP_SECURITY = "Security"
PROP_STRENGTH = "Strength"
PROP_DEVICE = "Device"
PROP_ERROR = "Error"
PROP_CONNECTABLE = "Connectable"
PROP_IPCONFIG = "IPConfig"

# ------------------------------------------------------------------
# Device properties
# ------------------------------------------------------------------

PROP_ADDRESS = "Address"
PROP_POWERED = "Powered"
PROP_SCANNING = "Scanning"
PROP_INTERFACE = "Interface"

# ------------------------------------------------------------------
# Technology types
# ------------------------------------------------------------------

TYPE_ETHERNET = "ethernet"
