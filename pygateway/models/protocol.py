from enum import Enum
from typing import Union

class Protocol(str, Enum):
    TCP = "TCP"
    UDP = "UDP"

    @classmethod
    def parse(cls, protocol: Union["Protocol", str]) -> "Protocol":
        """
        Accepts a Protocol or "tcp"/"udp" in any case
        Raises ValueError on anything else
        """

        if isinstance(protocol, cls):
            return protocol
        if not isinstance(protocol, str) or protocol.upper() not in cls.__members__:
            raise ValueError("Protocol must be TCP or UDP")
        return cls[protocol.upper()]
