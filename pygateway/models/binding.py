from ipaddress import IPv4Address, IPv6Address
from typing import NamedTuple, Union

from yarl import URL

class GatewayBinding(NamedTuple):
    """
    Resolved state of a gateway, fixed once resolution succeeds

    local_ip - address of this machine, used as NewInternalClient
    service_type - urn of the WAN connection service
    control_url - absolute url accepting SOAP actions for that service
    """

    local_ip: Union[IPv4Address, IPv6Address]
    service_type: str
    control_url: URL
