HTTP_SCHEME = "http"
HTTPS_SCHEME = "https"
WS_SCHEME = "ws"
WSS_SCHEME = "wss"
TCP_SCHEME = "tcp"
UDP_SCHEME = "udp"

# Ports applied when a request or stream connection string omits one
DEFAULT_PORT = 80
DEFAULT_SECURE_PORT = 443

MAX_PORT = 65535

# Usage messages carried by ConversionError, one per parser family
HTTP_USAGE = (
    "Invalid input, valid http config string would look like this: "
    "'http[s]://host_name[:port]'"
)
WEB_SOCKET_USAGE = (
    "Invalid input, valid web socket config string would look like this: "
    "'ws[s]://host_name[:port][/path]'"
)
TCP_USAGE = (
    "Invalid input, valid tcp config string would look like this: "
    "'tcp://host_name:port'"
)
UDP_USAGE = (
    "Invalid input, valid udp config string would look like this: "
    "'udp://host_name:port'"
)

# Default file names
CONFIG_FILE_NAME = "serverconf.yaml"
PROJECT_ROOT_MARKER = "pyproject.toml"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Connection strings exercised by `serverconf demo`
DEMO_CONNECTION_STRINGS = (
    "http://  www.google.com : 8080",
    "https://www.google.com",
    "ws://www.google.com/path-to-connect",
    "wss://www.google.com/path-to-connect",
    "wss://www.google.com:8888/path-to-connect",
    "tcp://www.google.com:9999",
    "udp://www.google.com:7777",
)
DEMO_DATAGRAM_CONVERSIONS = (
    "tcp://test.com:7890",
    "https://www.rust-lang.org",
)
