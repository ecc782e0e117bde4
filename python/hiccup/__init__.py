"""
Content negotiation for WSGI request handlers.

A handler written for this package returns a :py:class:`~hiccup.response.Response` object 
(a status code, headers, and an arbitrary body value) instead of writing bytes itself; a 
:py:class:`~hiccup.wsgi.ResponseHandler` wraps the handler and takes care of encoding the 
body into the format requested by the client via the ``Accept`` HTTP header.  

This package is organized into the following modules:

``response``
    the :py:class:`~hiccup.response.Response` object returned by handlers
``wsgi``
    the WSGI application that negotiates the response encoding 
``marshal``
    classes and functions for encoding response bodies by content type
``unmarshal``
    classes and functions for decoding request bodies by content type
``formats``
    the content-type registry shared by the encoders and decoders
``utils``
    functions for interpreting the ``Accept`` and ``Content-Type`` HTTP headers
``config``
    support for configuring an application and its logging
``exceptions``
    the exceptions raised by this package
"""
from .exceptions import HiccupException, ConfigurationException, BodyReadError, DecodingError
from .response import Response, respond, redirect
from .marshal import (Marshaler, ResponseEncoder, ResponseMarshaler, response_marshaler,
                      marshal_text, marshal_json, marshal_yaml)
from .unmarshal import (Unmarshaler, BodyDecoder, RequestUnmarshaler, RequestDecoder,
                        request_unmarshaler, with_decoder, decoder,
                        unmarshal_text, unmarshal_json, unmarshal_yaml)
from .wsgi import HandlerFunc, ResponseHandler, handler

try:
    from .version import __version__
except ImportError:
    __version__ = "(unset)"
