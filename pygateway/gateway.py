from __future__ import annotations

import logging
from ipaddress import ip_address, IPv4Address, IPv6Address
from itertools import count
from typing import List, Optional, Union

import requests
from yarl import URL

from pygateway.static import SLEEP_TIME, SPECIFIED_ARRAY_INDEX_INVALID
from pygateway.models import GatewayBinding, PortMapping, Protocol
from pygateway.network import IGD, SSDP, Requester, extract_location
from pygateway.exceptions import MalformedResponseError, SoapFault

logger = logging.getLogger(__name__)

IPAddress = Union[IPv4Address, IPv6Address]

def _check_port(port: int) -> int:
    if isinstance(port, bool) or not isinstance(port, int):
        raise ValueError(f"Port must be an integer, got {port!r}")
    if not 0 <= port <= 65535:
        raise ValueError("Port must be between 0 and 65535")
    return port

class Gateway:
    def __init__(self,
        local_ip: Union[str, IPAddress],
        ssdp_response: Union[str, bytes],
        session: requests.Session=None,
        timeout: float=None
    ):
        """
        local_ip - ip address of this machine, mappings are forwarded to it
        ssdp_response - raw answer of the gateway to an SSDP search
        session - requests session shared by every request (default is plain requests)
        timeout - timeout of each request in seconds (default is no timeout)

        Resolves the gateway's WAN connection service once, it is never looked up again
        Raises UnsupportedGatewayError if the gateway cannot manage port mappings
        """

        location = extract_location(ssdp_response)
        logger.debug("Device description is at %s", location)
        igd = IGD(location, session=session, timeout=timeout)

        self._binding = GatewayBinding(ip_address(local_ip), igd.service_type, igd.control_url)
        self._requester = Requester(igd.service_type, igd.control_url, session=session, timeout=timeout)

    @classmethod
    def discover(cls, wait_time: float=SLEEP_TIME, **kwargs) -> Gateway:
        """
        wait_time - how long to wait for IGD response (default is 3 seconds)
        kwargs - passed on to Gateway

        Finds the gateway of the local network with SSDP
        Raises GatewayNotFoundError if no gateway answers
        """

        ssdp = SSDP(wait_time=wait_time)
        return cls(ssdp.get_local_ip(), ssdp.response, **kwargs)

    @property
    def binding(self) -> GatewayBinding:
        return self._binding

    @property
    def local_ip(self) -> IPAddress:
        return self._binding.local_ip

    @property
    def service_type(self) -> str:
        return self._binding.service_type

    @property
    def control_url(self) -> URL:
        return self._binding.control_url

    def external_ip(self) -> Optional[IPAddress]:
        """
        Returns the external ip address, None if the gateway does not report a valid one
        """

        response = self._requester.call("GetExternalIPAddress")
        if not response or "NewExternalIPAddress" not in response:
            return None

        try:
            ip = ip_address(response["NewExternalIPAddress"])
        except ValueError:
            return None

        logger.debug("External ip is %s", ip)
        return ip

    def open(self, protocol: Union[Protocol, str], port: int, description: str=""):
        """
        protocol - protocol to allow over port ("TCP" or "UDP")
        port - port forwarded from the gateway to the same port on this machine
        description - description of port forward

        Maps port permanently (lease duration 0)
        Raises SoapFault if the gateway refuses the mapping
        """

        protocol = Protocol.parse(protocol)
        port = _check_port(port)

        self._requester.call("AddPortMapping", [
            ("NewRemoteHost", ""),
            ("NewProtocol", protocol),
            ("NewExternalPort", port),
            ("NewInternalClient", self.local_ip),
            ("NewInternalPort", port),
            ("NewEnabled", 1),
            ("NewPortMappingDescription", description),
            ("NewLeaseDuration", 0),
        ])
        logger.debug("Mapped %s port %s to %s", protocol.value, port, self.local_ip)

    def close(self, protocol: Union[Protocol, str], port: int):
        """
        Removes the mapping of an external port and protocol
        Raises SoapFault if the gateway refuses, e.g. 714 when there is no such mapping
        """

        protocol = Protocol.parse(protocol)
        port = _check_port(port)

        self._requester.call("DeletePortMapping", [
            ("NewRemoteHost", ""),
            ("NewProtocol", protocol),
            ("NewExternalPort", port),
        ])
        logger.debug("Removed mapping of %s port %s", protocol.value, port)

    def _get_specific_entry(self, protocol: Protocol, port: int) -> Optional[dict]:
        return self._requester.call("GetSpecificPortMappingEntry", [
            ("NewRemoteHost", ""),
            ("NewProtocol", protocol),
            ("NewExternalPort", port),
        ])

    def is_mapped(self, protocol: Union[Protocol, str], port: int) -> bool:
        """
        Whether the gateway has a mapping for the external port and protocol

        A missing mapping is usually reported as SoapFault 714, which is raised as is
        """

        protocol = Protocol.parse(protocol)
        port = _check_port(port)

        response = self._get_specific_entry(protocol, port)
        return response is not None and "NewInternalPort" in response

    def get_mapping(self, protocol: Union[Protocol, str], port: int) -> Optional[PortMapping]:
        """
        Returns the mapping of the external port and protocol, None on an empty answer
        Raises SoapFault if the gateway refuses, e.g. 714 when there is no such mapping
        """

        protocol = Protocol.parse(protocol)
        port = _check_port(port)

        response = self._get_specific_entry(protocol, port)
        if not response:
            return None
        return PortMapping.from_response(response, external_port=port, protocol=protocol)

    def get_all_mappings(self) -> List[PortMapping]:
        """
        Returns list of all port mappings on the gateway
        """

        all_mappings = []
        # keep going until we get an out of bounds error
        for index in count():
            try:
                response = self._requester.call("GetGenericPortMappingEntry", [
                    ("NewPortMappingIndex", index),
                ])
            except SoapFault as e:
                if e.code == SPECIFIED_ARRAY_INDEX_INVALID:
                    break
                raise
            if not response:
                break
            if "NewExternalPort" not in response and "NewInternalPort" not in response:
                raise MalformedResponseError(f"Entry {index} is not a port mapping: {response}")
            all_mappings.append(PortMapping.from_response(response))

        return all_mappings

    def __repr__(self) -> str:
        return f"Gateway(local_ip={self.local_ip}, service_type={self.service_type}, control_url={self.control_url})"
