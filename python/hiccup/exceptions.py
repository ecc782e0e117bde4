"""
Exceptions raised by the hiccup package
"""

class HiccupException(Exception):
    """
    a general base class for exceptions raised by this package
    """
    pass

class ConfigurationException(HiccupException):
    """
    an exception indicating that the configuration data provided to an application or one of its 
    components is missing a required value or is otherwise unusable.
    """
    pass

class BodyReadError(HiccupException):
    """
    an exception indicating that the request body could not be read from the input stream.  The 
    exception raised by the stream is available as ``__cause__``.  No attempt is made to decode 
    the body when this exception is raised.
    """
    pass

class DecodingError(HiccupException):
    """
    an exception indicating that a request body could not be decoded into the requested form.  
    The raw bytes of the body are attached so that a caller can inspect or log the payload.
    """

    def __init__(self, raw: bytes, content_type: str=None, message: str=None, cause=None):
        """
        :param bytes         raw:  the raw request body that failed to decode
        :param str  content_type:  the content type of the decoder that was applied
        :param str       message:  a description of the failure; if not provided, one is 
                                   generated from the content type and cause.
        :param Exception   cause:  the exception raised by the unmarshal function, if any
        """
        if not message:
            message = "Failed to decode request body"
            if content_type:
                message += " as " + content_type
            if cause:
                message += ": " + str(cause)
        super(DecodingError, self).__init__(message)
        self.raw = raw
        self.content_type = content_type
        self.cause = cause
