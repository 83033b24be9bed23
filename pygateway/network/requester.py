import logging
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple
from xml.sax.saxutils import escape

import requests
from yarl import URL

from pygateway.static import SOAP_ENVELOPE_NS, SOAP_ENCODING_NS
from pygateway.exceptions import SoapFault, TransportError
from pygateway.network.soup import parse_xml, first_text

logger = logging.getLogger(__name__)

class Requester:
    def __init__(self, service_type: str, control_url: URL, session: requests.Session=None, timeout: float=None):
        """
        service_type - urn of the service the actions belong to
        control_url - absolute url accepting SOAP actions for that service
        session - requests session used for every call (default is plain requests.post)
        timeout - timeout of each request in seconds (default is no timeout)
        """

        self.service_type = service_type
        self.control_url = control_url
        # module level requests when no session is shared
        self.session = session or requests
        self.timeout = timeout

    def make_headers(self, action: str) -> Dict[str, str]:
        """
        Generates headers for request

        action - SOAPAction
        """

        return {
            "SOAPAction": '"{scheme}#{action}"'.format(
                scheme=self.service_type,
                action=action
            ),
            "Content-Type": "text/xml"
        }

    @staticmethod
    def render(value: Any) -> str:
        """
        Text of an argument as the gateway expects it
        """

        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, Enum):
            return str(value.value)
        return str(value)

    def make_body(self, action: str, args: Iterable[Tuple[str, Any]]=()) -> str:
        """
        Generates body for request

        action - SOAPAction
        args - (name, value) pairs, emitted in the given order
        """

        content = "".join(
            "<{name}>{value}</{name}>".format(name=name, value=escape(self.render(value)))
            for name, value in args
        )

        return (
            '<?xml version="1.0"?>\n'
            '<s:Envelope xmlns:s="{envelope}" s:encodingStyle="{encoding}">'
            "<s:Body>"
            '<m:{action} xmlns:m="{scheme}">'
            "{content}"
            "</m:{action}>"
            "</s:Body>"
            "</s:Envelope>"
        ).format(
            envelope=SOAP_ENVELOPE_NS,
            encoding=SOAP_ENCODING_NS,
            action=action,
            scheme=self.service_type,
            content=content
        )

    def do_request(self, action: str, args: Iterable[Tuple[str, Any]]=()) -> requests.Response:
        headers = self.make_headers(action)
        body = self.make_body(action, args)

        try:
            return self.session.post(
                str(self.control_url),
                headers=headers,
                data=body.encode("utf-8"),
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"{action} request to {self.control_url} failed") from e

    @staticmethod
    def parse_response(content: bytes) -> Dict[str, str]:
        """
        Flattens a SOAP response into {element name: text} for every element holding text

        Raises SoapFault if the gateway reported an errorCode
        """

        parser = parse_xml(content)

        response = {}
        for tag in parser.find_all(True):
            text = first_text(tag)
            if text is not None:
                response[tag.name] = text

        # raise errors
        if "errorCode" in response:
            raise SoapFault(response["errorCode"], response.get("errorDescription"))
        return response

    def call(self, action: str, args: Iterable[Tuple[str, Any]]=()) -> Optional[Dict[str, str]]:
        """
        Runs action on the gateway

        action - SOAPAction
        args - (name, value) pairs of the action's arguments

        Returns response fields, None if the gateway answered with a non-2xx status
        """

        r = self.do_request(action, args)
        if not 200 <= r.status_code < 300:
            logger.warning("%s answered with HTTP %s", action, r.status_code)
            return None

        response = self.parse_response(r.content)
        logger.debug("%s returned %s", action, response)
        return response
