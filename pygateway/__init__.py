"""
pygateway: UPnP IGD port mapping for one gateway

Finds the WAN connection service of a gateway from its SSDP answer
and opens, closes and queries port mappings through it
"""

from pygateway.gateway import Gateway
from pygateway.models import GatewayBinding, PortMapping, Protocol
from pygateway.exceptions import (
    GatewayError,
    GatewayNotFoundError,
    UnsupportedGatewayError,
    TransportError,
    MalformedResponseError,
    SoapFault,
)
