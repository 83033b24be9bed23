from unittest.mock import MagicMock

import requests

LOCATION = "http://192.168.1.1:5000/desc.xml"
SSDP_TEXT = "HTTP/1.1 200 OK\r\nLOCATION: http://192.168.1.1:5000/desc.xml\r\n"
WAN_IP = "urn:schemas-upnp-org:service:WANIPConnection:1"

DESCRIPTION = b"""<?xml version="1.0"?>
<root xmlns="urn:schemas-upnp-org:device-1-0">
  <device>
    <deviceType>urn:schemas-upnp-org:device:InternetGatewayDevice:1</deviceType>
    <serviceList>
      <service>
        <serviceType>urn:schemas-upnp-org:service:Layer3Forwarding:1</serviceType>
        <controlURL>/ctl/L3F</controlURL>
      </service>
    </serviceList>
    <deviceList>
      <device>
        <deviceType>urn:schemas-upnp-org:device:WANConnectionDevice:1</deviceType>
        <serviceList>
          <service>
            <serviceType>urn:schemas-upnp-org:service:WANIPConnection:1</serviceType>
            <serviceId>urn:upnp-org:serviceId:WANIPConn1</serviceId>
            <controlURL>/ctl/IPConn</controlURL>
          </service>
        </serviceList>
      </device>
    </deviceList>
  </device>
</root>
"""

def description(*services) -> bytes:
    """
    Device description holding one service element per (serviceType, controlURL)
    """

    body = "".join(
        "<service><serviceType>{}</serviceType><controlURL>{}</controlURL></service>".format(*service)
        for service in services
    )
    return (
        '<?xml version="1.0"?>'
        '<root xmlns="urn:schemas-upnp-org:device-1-0"><device><serviceList>'
        + body +
        "</serviceList></device></root>"
    ).encode()

def soap_response(action: str, **fields) -> bytes:
    content = "".join("<{0}>{1}</{0}>".format(name, value) for name, value in fields.items())
    return (
        '<?xml version="1.0"?>'
        '<s:Envelope xmlns:s="http://schemas.xmlsoap.org/soap/envelope/" '
        's:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/"><s:Body>'
        '<u:{0}Response xmlns:u="{1}">{2}</u:{0}Response>'
        "</s:Body></s:Envelope>"
    ).format(action, WAN_IP, content).encode()

def soap_fault(code: str, description: str) -> bytes:
    return (
        '<?xml version="1.0"?>'
        '<s:Envelope xmlns:s="http://schemas.xmlsoap.org/soap/envelope/" '
        's:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/"><s:Body>'
        "<s:Fault><faultcode>s:Client</faultcode><faultstring>UPnPError</faultstring>"
        '<detail><UPnPError xmlns="urn:schemas-upnp-org:control-1-0">'
        "<errorCode>{}</errorCode><errorDescription>{}</errorDescription>"
        "</UPnPError></detail></s:Fault></s:Body></s:Envelope>"
    ).format(code, description).encode()

def http_response(content: bytes, status_code: int=200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(str(status_code))
    return response

def make_session(description: bytes=DESCRIPTION, *posts) -> MagicMock:
    """
    Session answering GET with description and each POST with the next of posts
    """

    session = MagicMock(spec=requests.Session)
    session.get.return_value = http_response(description)
    session.post.side_effect = list(posts)
    return session
