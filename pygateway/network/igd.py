import logging
from typing import Tuple

import requests
from yarl import URL

from pygateway.static import WAN_SERVICES
from pygateway.exceptions import TransportError, UnsupportedGatewayError
from pygateway.network.soup import parse_xml, children, first_text

logger = logging.getLogger(__name__)

def resolve(location: str, session: requests.Session=None, timeout: float=None) -> Tuple[str, URL]:
    """
    Finds the WAN connection service of the device described at location

    location - device description url taken from the SSDP response
    session - requests session used to fetch the description (default is plain requests.get)
    timeout - timeout of the request in seconds (default is no timeout)

    Returns tuple of service type, absolute control url
    Raises UnsupportedGatewayError if no WANIPConnection/WANPPPConnection service is described
    """

    # first slash after http://
    if location.find("/", 7) == -1:
        raise UnsupportedGatewayError(f"Unusable location {location!r}")

    # module level requests when no session is shared
    http = session or requests

    try:
        r = http.get(location, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise TransportError(f"Could not fetch device description from {location}") from e

    parser = parse_xml(r.content)

    service_type = None
    control_path = None
    # look for types of services, the last matching one is kept
    for service in parser.find_all("service"):
        fields = {}
        for child in children(service):
            name = child.name.strip().lower()
            if name in ("servicetype", "controlurl"):
                fields[name] = first_text(child)

        if fields.get("servicetype") is None or fields.get("controlurl") is None:
            continue
        if any(marker in fields["servicetype"].lower() for marker in WAN_SERVICES):
            service_type = fields["servicetype"]
            control_path = fields["controlurl"]

    if control_path is None:
        raise UnsupportedGatewayError(f"No WAN connection service described at {location}")

    if not control_path.startswith("/"):
        control_path = "/" + control_path
    # keep scheme, host and port of the description url as they were announced
    origin = location[:location.index("/", 7)]
    control_url = URL(origin + control_path, encoded=True)

    logger.debug("Service type is %s", service_type)
    logger.debug("Control url is %s", control_url)
    return service_type, control_url

class IGD:
    def __init__(self, location: str, session: requests.Session=None, timeout: float=None):
        """
        location - device description url taken from the SSDP response
        session, timeout - passed on to requests when fetching the description
        """

        self.location = location
        self._service_type, self._control_url = resolve(location, session=session, timeout=timeout)

    @property
    def service_type(self) -> str:
        return self._service_type

    @property
    def control_url(self) -> URL:
        return self._control_url
