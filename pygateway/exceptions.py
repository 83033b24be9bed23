class GatewayError(Exception):
    """
    Base class for every error raised by pygateway
    """


class GatewayNotFoundError(GatewayError):
    """
    No gateway answered the SSDP search in time
    """


class UnsupportedGatewayError(GatewayError):
    """
    The discovered device has no usable location or exposes no
    WANIPConnection / WANPPPConnection service
    """


class TransportError(GatewayError):
    """
    HTTP request to the gateway failed
    """


class MalformedResponseError(TransportError):
    """
    Gateway answered with something that is not an XML document
    """


class SoapFault(GatewayError):
    def __init__(self, code: str, description: str=None):
        """
        code - errorCode reported by the gateway (e.g. "714")
        description - errorDescription reported by the gateway, if any
        """

        self.code = code
        self.description = description
        if description:
            super().__init__(f"{code}: {description}")
        else:
            super().__init__(code)
