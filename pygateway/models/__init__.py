from pygateway.models.protocol import Protocol
from pygateway.models.binding import GatewayBinding
from pygateway.models.response import PortMapping
