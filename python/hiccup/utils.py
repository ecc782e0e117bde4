"""
functions that assist with interpreting the content-type-related headers of a web service request
"""
import re

__all__ = [ 'is_media_type', 'parse_media_type' ]

# token characters allowed by RFC 7230, sec. 3.2.6
_token = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_media_type_re = re.compile(r'^' + _token + '(/' + _token + ')?$')

def is_media_type(label: str) -> bool:
    """
    return True if the given label can serve as a bare media type:  either a ``type/subtype``
    pair (e.g. "text/plain") or a single token with no subtype (e.g. "json").  Parameters are
    not allowed.
    """
    return bool(label and _media_type_re.match(label))

def _first_value(value: str) -> str:
    # only the first of multiple comma-separated values is considered
    return value.split(',', 1)[0]

def parse_media_type(value: str) -> str:
    """
    return the bare media type given in an ``Accept`` or ``Content-Type`` header value.  Any 
    parameters (e.g. ``charset`` or ``q``) are dropped, and the type is normalized to lower case.
    If the header lists several media types, only the first one is returned; neither wildcards 
    nor q-values are interpreted.  A single token without a subtype (e.g. "json") is accepted
    as is.

    :param str value:  the header value; this can be None if the header was not provided
    :return:  the media type, or an empty string if the value is missing or cannot be 
              parsed as a media type
              :rtype: str
    """
    if not value:
        return ''
    mtype = _first_value(value).split(';', 1)[0].strip().lower()
    if not is_media_type(mtype):
        return ''
    return mtype
