"""
The WSGI application that negotiates how a handler's response is encoded.

A handler function takes the WSGI environment of a request and returns a
:py:class:`~hiccup.response.Response`; wrapping it with :py:func:`handler` yields a WSGI
application that encodes the response body with the :py:class:`~hiccup.marshal.ResponseEncoder`
matching the client's ``Accept`` header:

.. code-block:: python

   def hello(env):
       return respond(200).set_body({"message": "Hello World!"})

   application = handler(hello,
                         response_marshaler("application/json", marshal_json),  # the default
                         response_marshaler("application/yaml", marshal_yaml))
"""
import logging
from collections.abc import Mapping
from functools import reduce
from http.client import responses as _reasons
from logging import Logger
from typing import Callable, List
from wsgiref.headers import Headers

from .response import Response
from .marshal import ResponseEncoder, EncoderSupport, marshal_text
from .utils import parse_media_type
from .config import TEXT_CONTENT_TYPE
from .exceptions import ConfigurationException

__all__ = [ "HandlerFunc", "ResponseHandler", "handler" ]

HandlerFunc = Callable[[Mapping], Response]
"""
the signature of a request handler function:  it takes the WSGI environment of a request and
returns the :py:class:`~hiccup.response.Response` to send.
"""

class ResponseHandler(object):
    """
    a WSGI application that calls a :py:data:`HandlerFunc` and encodes the body of the
    :py:class:`~hiccup.response.Response` it returns.

    The encoding is chosen by matching the request's ``Accept`` header against the content types
    of the configured encoders; if there is no match (or no ``Accept`` header), the first encoder
    is used.  If no encoders are configured, the body is sent as plain text.  If the selected
    encoder fails on the body, the error message is sent as plain text with a 500 status.

    The following configuration properties are supported:

    ``text_content_type``
         the content type to label plain text responses with (default:
         :py:data:`~hiccup.config.TEXT_CONTENT_TYPE`)
    ``include_headers``
         headers to include in every response, given either as a dictionary or as a list of
         name-value pairs.  Headers set in a Response override these.

    An instance keeps no state between requests and may handle them concurrently.
    """

    def __init__(self, handler: HandlerFunc, encoders: List[ResponseEncoder]=None,
                 config: Mapping=None, log: Logger=None):
        """
        :param HandlerFunc handler:  the function that handles each request
        :param list       encoders:  the supported response encoders; the first is the default
        :param Mapping      config:  the configuration for this application
        :param Logger          log:  the logger to send messages to
        """
        self.handler = handler
        self.encoders = EncoderSupport(encoders)
        if config is None:
            config = {}
        self.cfg = config
        if not log:
            log = logging.getLogger(__name__)
        self.log = log

        self.text_content_type = self.cfg.get('text_content_type', TEXT_CONTENT_TYPE)
        self.include_headers = []
        incl = self.cfg.get('include_headers')
        if incl:
            try:
                if isinstance(incl, Mapping):
                    incl = list(incl.items())
                elif not isinstance(incl, list):
                    raise TypeError("Not a list of 2-tuples")
                self.include_headers = [(str(k), str(v)) for k, v in incl]
            except (TypeError, ValueError) as ex:
                raise ConfigurationException("include_headers: must be either a dict or a list of "+
                                             "name-value pairs") from ex

    def __call__(self, env: Mapping, start_resp: Callable):
        res = self.handler(env)
        ashead = env.get('REQUEST_METHOD', 'GET').upper() == "HEAD"
        accept = parse_media_type(env.get('HTTP_ACCEPT'))

        enc = self.encoders.resolve(accept)
        if enc:
            self.log.debug("Encoding response as %s (requested: %s)", enc.content_type,
                           accept or "none")
            return self.send_encoded(start_resp, res, enc, ashead)
        return self.send_text(start_resp, res, ashead)

    def send_encoded(self, start_resp: Callable, res: Response, enc: ResponseEncoder,
                     ashead: bool=False):
        """
        send the response with its body encoded by the given encoder.  If the encoder fails, the
        error message is sent instead as plain text with a 500 status; the response's own headers
        are not sent in that case.
        """
        try:
            body = enc.marshal(res.body)
        except Exception as ex:
            self.log.error("Failed to encode response body as %s: %s", enc.content_type, str(ex))
            return self.send_text(start_resp, Response(500, str(ex)), ashead, False)

        hdrs = self._make_headers(res)
        hdrs['Content-Type'] = enc.content_type
        return self._send(start_resp, res.status_code, hdrs, body, ashead)

    def send_text(self, start_resp: Callable, res: Response, ashead: bool=False,
                  withheaders: bool=True):
        """
        send the response with its body rendered as plain text
        :param bool withheaders:  if False, the headers set in the response are not sent
        """
        hdrs = self._make_headers(res if withheaders else None)
        hdrs['Content-Type'] = self.text_content_type
        return self._send(start_resp, res.status_code, hdrs, marshal_text(res.body), ashead)

    def _make_headers(self, res: Response=None) -> Headers:
        hdrs = Headers(list(self.include_headers))
        if res:
            for k, v in res.headers.items():
                hdrs[k] = v
            if res.redirect_uri and 'Location' not in hdrs:
                hdrs['Location'] = res.redirect_uri
        return hdrs

    def _send(self, start_resp, code, hdrs, body, ashead):
        content = [body] if body else []
        if content:
            hdrs['Content-Length'] = str(reduce(lambda x, t: x+len(t), content, 0))

        status = "{0} {1}".format(str(code), _reasons.get(code, "Unknown Status"))
        start_resp(status, hdrs.items(), None)
        return (not ashead and content) or []

def handler(h: HandlerFunc, *encoders: ResponseEncoder, config: Mapping=None,
            log: Logger=None) -> ResponseHandler:
    """
    return a WSGI application for the given handler function and response encoders.  The first
    encoder given is used as the default if the client's ``Accept`` header does not match any
    of the encoders or if no ``Accept`` header is sent.  If no encoders are given, response
    bodies are sent as plain text.

    See :py:class:`ResponseHandler` for the supported configuration properties.
    """
    return ResponseHandler(h, list(encoders), config, log)
