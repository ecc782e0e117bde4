"""
Support for decoding request bodies according to the request's ``Content-Type``.

A :py:class:`RequestDecoder`, created via :py:func:`decoder`, holds the set of
:py:class:`BodyDecoder`\\ s that a handler accepts and is usually created once when the
application is set up.  Within a handler, :py:meth:`RequestDecoder.decode_body` reads the body
from the WSGI environment and decodes it with the decoder matching the request's content type.
"""
import json, logging
from abc import ABCMeta, abstractmethod, abstractproperty
from collections.abc import MutableMapping, MutableSequence, Mapping, Sequence
from logging import Logger
from typing import Any, Callable, Tuple

import yaml

from .formats import FormatSupport
from .utils import parse_media_type
from .exceptions import BodyReadError, DecodingError

__all__ = [ "Unmarshaler", "BodyDecoder", "RequestUnmarshaler", "RequestDecoder",
            "request_unmarshaler", "with_decoder", "decoder",
            "unmarshal_text", "unmarshal_json", "unmarshal_yaml" ]

Unmarshaler = Callable[[bytes], Any]
"""
the signature of a function that decodes a request body.  It should raise an exception if the
body cannot be decoded.
"""

class BodyDecoder(metaclass=ABCMeta):
    """
    an interface for decoding request body content of a particular content type
    """

    @abstractproperty
    def content_type(self) -> str:
        """
        the content type this decoder handles
        """
        raise NotImplementedError()

    @abstractmethod
    def unmarshal(self, data: bytes) -> Any:
        """
        decode the given request body content
        """
        raise NotImplementedError()

class RequestUnmarshaler(BodyDecoder):
    """
    a :py:class:`BodyDecoder` that delegates the decoding to an :py:data:`Unmarshaler` function
    """

    def __init__(self, content_type: str, unmarshaler: Unmarshaler):
        self._ctype = content_type
        self._unmarshaler = unmarshaler

    @property
    def content_type(self) -> str:
        return self._ctype

    def unmarshal(self, data: bytes) -> Any:
        return self._unmarshaler(data)

    def __repr__(self):
        return "RequestUnmarshaler(%r)" % self._ctype

def request_unmarshaler(content_type: str, unmarshaler: Unmarshaler) -> RequestUnmarshaler:
    """
    return a :py:class:`BodyDecoder` for the given content type and unmarshaler function
    """
    return RequestUnmarshaler(content_type, unmarshaler)

with_decoder = request_unmarshaler

class RequestDecoder(FormatSupport):
    """
    a set of :py:class:`BodyDecoder`\\ s that can decode request body content of different
    content types.  The first decoder given is the default, used if the request has no
    ``Content-Type`` or one that is not supported.

    See the :py:func:`decoder` function.
    """

    def __init__(self, decoders=None, log: Logger=None):
        super(RequestDecoder, self).__init__(decoders)
        if not log:
            log = logging.getLogger(__name__)
        self.log = log

    def read_body(self, env: Mapping) -> bytes:
        """
        read in the complete request body from the WSGI environment, closing the input stream
        when done.  If ``CONTENT_LENGTH`` is set, at most that many bytes are read.
        :raises BodyReadError:  if the stream fails while being read
        """
        bodyin = env.get('wsgi.input')
        if bodyin is None:
            return b''

        try:
            contlen = env.get('CONTENT_LENGTH')
            if contlen not in (None, ''):
                body = bodyin.read(int(contlen))
            else:
                body = bodyin.read()
        except Exception as ex:
            raise BodyReadError("Failed to read request body: " + str(ex)) from ex
        finally:
            if hasattr(bodyin, 'close'):
                bodyin.close()

        if isinstance(body, str):
            body = body.encode('utf-8')
        return body or b''

    def decode_body(self, env: Mapping, target=None) -> Tuple[bytes, Any]:
        """
        read the request body and decode it with the decoder matching the request's
        ``Content-Type``; if there is no match, the default decoder is used.

        If a ``target`` is provided, it should be a dictionary, a list, or a plain object; the
        decoded content will be merged into it in place, and the target is returned as the
        decoded value.  For a plain object, each key of the decoded object is set as an
        attribute.  If the content decodes to null, the target is left unchanged.

        If no decoders are configured, the body is not decoded:  the target is returned
        unmodified along with the raw bytes.  If the request is None or its body is empty,
        ``(None, target)`` is returned.

        :param Mapping env:  the WSGI environment containing the request
        :param target:  the container to load the decoded content into.
        :return:  a 2-tuple of the raw request body and the decoded value
        :raises BodyReadError:  if the body could not be read; no decoding is attempted
        :raises DecodingError:  if the decoder fails on the body or its content does not fit
                                the target.  The raw body is available as its ``raw`` property.
        """
        if env is None:
            return (None, target)

        body = self.read_body(env)
        if not body:
            return (None, target)

        dec = self.resolve(parse_media_type(env.get('CONTENT_TYPE')))
        if not dec:
            return (body, target)

        try:
            data = dec.unmarshal(body)
            if target is not None:
                data = _load_into(target, data)
        except Exception as ex:
            if self.log.isEnabledFor(logging.DEBUG):
                self.log.debug("Failed to parse input as %s: %s", dec.content_type, str(ex))
                self.log.debug("\n%s", body)
            raise DecodingError(body, dec.content_type, cause=ex) from ex

        return (body, data)

def _load_into(target, data):
    if data is None:
        # a null document (e.g. JSON "null" or YAML with only comments) leaves the target as is
        return target

    if isinstance(target, MutableMapping):
        if not isinstance(data, Mapping):
            raise TypeError("expected an object, got " + type(data).__name__)
        target.update(data)
    elif isinstance(target, MutableSequence):
        if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
            raise TypeError("expected an array, got " + type(data).__name__)
        target[:] = data
    elif hasattr(target, '__dict__') and not isinstance(target, type):
        if not isinstance(data, Mapping):
            raise TypeError("expected an object, got " + type(data).__name__)
        for name, val in data.items():
            setattr(target, name, val)
    else:
        raise TypeError("unsupported target type: " + type(target).__name__)
    return target

def decoder(*decoders: BodyDecoder, log: Logger=None) -> RequestDecoder:
    """
    return a :py:class:`RequestDecoder` configured with the given decoders.  The first one
    given is used as the default if no ``Content-Type`` is sent with a request or if its value
    is not supported.  If no decoders are given, :py:meth:`~RequestDecoder.decode_body` will only
    return the raw body.
    """
    return RequestDecoder(decoders, log)

def unmarshal_text(data: bytes) -> str:
    """
    an :py:data:`Unmarshaler` that returns the body as UTF-8 text
    """
    return data.decode('utf-8')

def unmarshal_json(data: bytes) -> Any:
    """
    an :py:data:`Unmarshaler` for JSON
    """
    return json.loads(data)

def unmarshal_yaml(data: bytes) -> Any:
    """
    an :py:data:`Unmarshaler` for YAML documents
    """
    return yaml.safe_load(data)
