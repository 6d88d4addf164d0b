# consts.py - HTTP method and API version names used by the client

DEFAULT_API_URL = "https://api.digitickets.co.uk/"


class Request:
    METHOD_HEAD = "HEAD"
    METHOD_GET = "GET"
    METHOD_POST = "POST"
    METHOD_PUT = "PUT"
    METHOD_PATCH = "PATCH"
    METHOD_DELETE = "DELETE"
    METHOD_PURGE = "PURGE"
    METHOD_OPTIONS = "OPTIONS"
    METHOD_TRACE = "TRACE"
    METHOD_CONNECT = "CONNECT"


class ApiVersion:
    # Empty string means the unversioned API root.
    NONE = ""
    V1 = "v1"
    V2 = "v2"
