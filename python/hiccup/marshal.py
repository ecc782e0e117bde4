"""
Support for encoding response bodies according to a requested content type.

A :py:class:`ResponseEncoder` pairs a content type with a function that turns a response body 
value into bytes of that type.  Most applications need not implement the interface themselves:  
the :py:func:`response_marshaler` function builds an encoder from a content type and any 
:py:data:`Marshaler` function, such as :py:func:`marshal_json` or :py:func:`marshal_yaml`.
"""
import json
from abc import ABCMeta, abstractmethod, abstractproperty
from typing import Any, Callable, Iterable, Union

import yaml

from .formats import FormatSupport

__all__ = [ "Marshaler", "ResponseEncoder", "ResponseMarshaler", "EncoderSupport",
            "response_marshaler", "marshal_text", "marshal_json", "marshal_yaml" ]

Marshaler = Callable[[Any], Union[bytes, str]]
"""
the signature of a function that encodes a response body value.  The function should raise an 
exception if the value cannot be encoded; a returned ``str`` is encoded as UTF-8.
"""

class ResponseEncoder(metaclass=ABCMeta):
    """
    an interface for encoding response body content into a particular content type.

    See also the :py:func:`response_marshaler` function.
    """

    @abstractproperty
    def content_type(self) -> str:
        """
        the content type to respond with
        """
        raise NotImplementedError()

    @abstractmethod
    def marshal(self, value: Any) -> bytes:
        """
        encode the given response body content
        """
        raise NotImplementedError()

class ResponseMarshaler(ResponseEncoder):
    """
    a :py:class:`ResponseEncoder` that delegates the encoding to a :py:data:`Marshaler` function
    """

    def __init__(self, content_type: str, marshaler: Marshaler):
        self._ctype = content_type
        self._marshaler = marshaler

    @property
    def content_type(self) -> str:
        return self._ctype

    def marshal(self, value: Any) -> bytes:
        """
        encode the given value with the marshaler function.  Any exception raised by the 
        function is passed through unchanged.
        :raises TypeError:  if the marshaler returns something other than bytes or str
        """
        out = self._marshaler(value)
        if isinstance(out, str):
            return out.encode('utf-8')
        if not isinstance(out, (bytes, bytearray)):
            raise TypeError("%s marshaler returned non-bytes: %s" % (self._ctype, type(out).__name__))
        return bytes(out)

    def __repr__(self):
        return "ResponseMarshaler(%r)" % self._ctype

def response_marshaler(content_type: str, marshaler: Marshaler) -> ResponseMarshaler:
    """
    return a :py:class:`ResponseEncoder` for the given content type and marshaler function.  The 
    result can be passed to :py:func:`~hiccup.wsgi.handler` to support multiple response 
    encodings based on the ``Accept`` header sent with a request.
    """
    return ResponseMarshaler(content_type, marshaler)

class EncoderSupport(FormatSupport):
    """
    the set of :py:class:`ResponseEncoder` instances available to a handler.  The first encoder registered 
    is the default one, used when the client does not ask for a supported content type.
    """

    def __init__(self, encoders: Iterable[ResponseEncoder]=None):
        super(EncoderSupport, self).__init__(encoders)

def marshal_text(value: Any) -> bytes:
    """
    a :py:data:`Marshaler` that renders any value in its plain text form.  Bytes are passed 
    through as is; None is rendered as an empty body.
    """
    if value is None:
        return b''
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return str(value).encode('utf-8')

def marshal_json(value: Any) -> bytes:
    """
    a :py:data:`Marshaler` that renders a value as compact JSON
    """
    return json.dumps(value, separators=(',', ':')).encode('utf-8')

def marshal_yaml(value: Any) -> bytes:
    """
    a :py:data:`Marshaler` that renders a value as a (block-style) YAML document
    """
    return yaml.safe_dump(value, default_flow_style=False, allow_unicode=True,
                          sort_keys=False).encode('utf-8')
