from pygateway.network.ssdp import SSDP, extract_location
from pygateway.network.igd import IGD, resolve
from pygateway.network.requester import Requester
