SSDP_ADDRESS = ("239.255.255.250", 1900)
SSDP_REQUEST = (
    b"M-SEARCH * HTTP/1.1\r\n"
    b"Host:239.255.255.250:1900\r\n"
    b"ST:urn:schemas-upnp-org:device:InternetGatewayDevice:1\r\n"
    b'Man:"ssdp:discover"\r\n'
    b"MX:3\r\n"
    b"\r\n"
)
SLEEP_TIME = 3

# service types able to manage port mappings
WAN_SERVICES = (":wanipconnection:", ":wanpppconnection:")

SOAP_ENVELOPE_NS = "http://schemas.xmlsoap.org/soap/envelope/"
SOAP_ENCODING_NS = "http://schemas.xmlsoap.org/soap/encoding/"

# upnp error codes
SPECIFIED_ARRAY_INDEX_INVALID = "713"
NO_SUCH_ENTRY_IN_ARRAY = "714"
CONFLICT_IN_MAPPING_ENTRY = "718"
