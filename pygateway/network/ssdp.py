import logging
import socket
from typing import Union

from pygateway.static import SSDP_ADDRESS, SSDP_REQUEST, SLEEP_TIME
from pygateway.exceptions import GatewayNotFoundError, UnsupportedGatewayError

logger = logging.getLogger(__name__)

def extract_location(response: Union[str, bytes]) -> str:
    """
    Returns the device description url announced in an SSDP response

    response - raw text of an M-SEARCH answer or NOTIFY request

    Raises UnsupportedGatewayError if there is no LOCATION header
    or its value has no path after the scheme
    """

    if isinstance(response, bytes):
        response = response.decode("utf-8", errors="replace")

    lines = (line.strip() for line in response.split("\n"))
    for line in lines:
        if not line:
            continue
        # status line / request line
        if line.startswith("HTTP/1.") or line.startswith("NOTIFY *"):
            continue

        name, colon, value = line.partition(":")
        if not colon:
            continue

        if name.lower() == "location":
            value = value.strip()
            # first slash after http://
            if value.find("/", 7) == -1:
                raise UnsupportedGatewayError(f"Unusable location {value!r}")
            return value

    raise UnsupportedGatewayError("SSDP response has no location")

class SSDP:
    def __init__(self, wait_time: float=SLEEP_TIME):
        """
        wait_time - how long to wait for IGD response (default is 3 seconds)

        Asks the network for an IGD and keeps the first answer
        Raises GatewayNotFoundError if nothing answers in time
        """

        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.settimeout(wait_time)
            logger.debug("Looking for IGD")
            sock.sendto(SSDP_REQUEST, SSDP_ADDRESS)

            try:
                self.response, self.address = sock.recvfrom(4096)
            except socket.timeout:
                raise GatewayNotFoundError("Could not find a UPnP enabled IGD")

        logger.debug("IGD ip is %s", self.address[0])

    def get_local_ip(self) -> str:
        """
        Returns local ip address used to reach the IGD
        """

        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            # connect to igd device to check what ip is
            s.connect((self.address[0], 0))
            ip = s.getsockname()[0]

        logger.debug("Local ip is %s", ip)
        return ip
