"""
The registry used to select an encoder or decoder by content type
"""
from collections import OrderedDict
from typing import Iterable, List

from .utils import is_media_type

__all__ = [ "FormatSupport" ]

class FormatSupport(object):
    """
    a class that encapsulates a set of codecs--objects with a ``content_type`` property, such as
    :py:class:`~hiccup.marshal.ResponseEncoder` and :py:class:`~hiccup.unmarshal.BodyDecoder`
    instances--and which can be used to select the one registered for a requested content type.

    The first codec registered becomes the default, the one returned by :py:meth:`resolve` when
    the requested content type is not supported.  An instance is intended to be filled at
    construction time and only read afterward; thus, it can be shared by concurrently handled
    requests without locking.
    """

    def __init__(self, codecs: Iterable=None):
        """
        create an instance with the given codecs registered as supported
        :param codecs:  the codecs to register, in order; the first one becomes the default
        """
        self._lu = OrderedDict()
        self._deffmt = None
        if codecs:
            for codec in codecs:
                self.support(codec)

    def support(self, codec, asdefault: bool=False):
        """
        add support for the content type handled by the given codec.  If another codec was
        already registered for the same content type, it is replaced in the lookup; however,
        it remains the default if it was registered first.
        :param codec:  the codec to register; it must have a ``content_type`` property
        :param bool asdefault:  if True, set this codec to be the default (i.e. the one returned
                       by :py:meth:`default_format`), even if others were registered before it.
        :raises ValueError:  if the codec's content type is not a bare media type
        """
        ct = codec.content_type
        if not is_media_type(ct):
            raise ValueError("Not a content type: " + repr(ct))
        self._lu[ct.lower()] = codec
        if asdefault or not self._deffmt:
            self._deffmt = codec

    def match(self, ctype: str):
        """
        return the codec registered for exactly the given content type (ignoring case) or None
        if that type is not supported.
        """
        if not ctype:
            return None
        return self._lu.get(ctype.lower())

    def default_format(self):
        """
        the codec to use when a content type was not requested or is not supported.  This is
        None if no codecs are registered.
        """
        return self._deffmt

    def resolve(self, ctype: str):
        """
        return the codec that should be used for the given content type:  the one registered
        for that type, if any, or otherwise the default.  None is returned only when no codecs
        are registered.
        :param str ctype:  the bare content type requested (as returned by
                           :py:func:`~hiccup.utils.parse_media_type`); an empty string or None
                           indicates that none was requested.
        """
        out = self.match(ctype)
        if out is None:
            out = self.default_format()
        return out

    def content_types(self) -> List[str]:
        """
        return the supported content types in the order they were registered
        """
        return [c.content_type for c in self._lu.values()]

    def __len__(self):
        return len(self._lu)

    def __contains__(self, ctype):
        return self.match(ctype) is not None
