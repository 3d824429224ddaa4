"""
Custom exceptions for tprint
"""


class TPrintException(Exception):
    """Base exception for tprint"""
    pass


class FormatError(TPrintException):
    """Format template or value kind mismatch"""
    pass


class OutputException(TPrintException, IOError):
    """Writing to the output sink failed"""
    pass


class TableDestroyedException(TPrintException):
    """Table used after destroy()"""
    pass


class ConfigurationException(TPrintException):
    """Configuration related exceptions"""
    pass


class DocumentException(TPrintException):
    """Malformed table document"""
    pass
