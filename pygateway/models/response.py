from __future__ import annotations

from datetime import timedelta
from typing import Dict

from pygateway.models.protocol import Protocol
from pygateway.exceptions import MalformedResponseError

class PortMapping:
    def __init__(self,
        external_port: int=None,
        protocol: Protocol=None,
        internal_ip: str=None,
        internal_port: int=None,
        enabled: bool=None,
        description: str=None,
        duration: timedelta=None
    ):
        """
        external_port - external port on the gateway which is mapped
        protocol - protocol allowed over the port (Protocol.TCP or Protocol.UDP)
        internal_ip - internal ip the port is forwarded to
        internal_port - internal port the port is forwarded to
        enabled - whether the gateway reports the mapping as active
        description - description of port forward
        duration - lease duration of port mapping as a timedelta (zero means permanent)
        """

        self.external_port = external_port
        self.protocol = protocol
        self.internal_ip = internal_ip
        self.internal_port = internal_port
        self.enabled = enabled
        self.description = description
        self.duration = duration

    @classmethod
    def from_response(cls, response: Dict[str, str], external_port: int=None, protocol: Protocol=None) -> PortMapping:
        """
        Builds a PortMapping from the fields of a GetSpecificPortMappingEntry
        or GetGenericPortMappingEntry response

        external_port, protocol - used when the response does not echo them
            (GetSpecificPortMappingEntry only returns the internal side)
        """

        try:
            if "NewExternalPort" in response:
                external_port = int(response["NewExternalPort"])
            if "NewProtocol" in response:
                protocol = Protocol.parse(response["NewProtocol"])
            internal_port = response.get("NewInternalPort")
            internal_port = int(internal_port) if internal_port else None
            duration = response.get("NewLeaseDuration")
            duration = timedelta(seconds=int(duration)) if duration else None
        except ValueError as e:
            raise MalformedResponseError(f"Invalid port mapping entry {response}") from e

        return cls(
            external_port=external_port,
            protocol=protocol,
            internal_ip=response.get("NewInternalClient"),
            internal_port=internal_port,
            enabled=response.get("NewEnabled") == "1",
            # an empty description is not a leaf, so it never reaches the mapping
            description=response.get("NewPortMappingDescription", ""),
            duration=duration
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, PortMapping):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        return f"PortMapping(external_port={self.external_port}, protocol={self.protocol}, internal_ip={self.internal_ip}, internal_port={self.internal_port}, enabled={self.enabled}, description={self.description}, duration={self.duration})"
