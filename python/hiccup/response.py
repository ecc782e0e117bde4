"""
The Response object returned by request handler functions
"""
from typing import Any, Mapping

__all__ = [ "Response", "respond", "redirect" ]

class Response(object):
    """
    the result of a handler function:  an HTTP status code, the headers to set, and a body value
    to be encoded according to the client's preferences.  A handler builds a Response via chained
    calls, as in:

    .. code-block:: python

       return respond(200).set_body({"message": "Hello"}).set_header("Cache-Control", "no-cache")

    A Response is meant to be created and returned within a single request; it is not shared
    between requests.
    """

    def __init__(self, status_code: int, body: Any=None, headers: Mapping[str, str]=None):
        self.status_code = status_code
        self.body = body
        self.headers = dict(headers) if headers else {}
        self.redirect_uri = None

    def set_status(self, status_code: int):
        """
        set the HTTP status code to send
        """
        self.status_code = status_code
        return self

    def set_body(self, value: Any):
        """
        set the response body to the given value
        """
        self.body = value
        return self

    def set_header(self, key: str, value: str):
        """
        set a header value.  Any existing value will be overwritten.
        """
        self.headers[key] = value
        return self

    def set_headers(self, headers: Mapping[str, str]):
        """
        set all header values at once, replacing all existing header values.
        """
        self.headers = dict(headers) if headers else {}
        return self

    def set_redirect(self, uri: str):
        """
        set the location to redirect the client to.  This also sets the ``Location`` header;
        it is up to the caller to also set a 3XX status code.
        """
        self.redirect_uri = uri
        return self.set_header("Location", uri)

    def __repr__(self):
        return "Response(%r)" % self.status_code

def respond(status_code: int) -> Response:
    """
    return a :py:class:`Response` object with the given status as a handler function's return value
    """
    return Response(status_code)

def redirect(uri: str, status_code: int=302) -> Response:
    """
    return a :py:class:`Response` that redirects the client to the given URI
    :param str          uri:  the location to redirect the client to
    :param int  status_code:  the 3XX status to send; the default is 302 (Found)
    """
    return Response(status_code).set_redirect(uri)
