class MaryException(Exception):
    '''Base class to extend in order to throw exception in maryhdr.

    It takes as first argument the chain of the layer that caused the
    exception (the names of the fields, outermost last) and optionally
    the value that was refused.
    '''

    def __init__(self, chain, value=None, message=None):
        self.chain = chain
        self.value = value
        super().__init__(message if message is not None else self._default_message())

    def _default_message(self):
        where = '.'.join(reversed(self.chain)) or '<root>'
        if self.value is None:
            return where

        return f'{where}: {self.value!r}'


class UnpackException(MaryException):
    pass


class TruncatedInputException(UnpackException):
    '''Less bytes than needed were available in the stream.'''
    pass


class ValidationException(MaryException):
    pass


class MagicException(ValidationException):
    pass


class TypeException(ValidationException):
    pass


class IllFormedHeaderException(ValidationException):
    '''Raised when a strict load finds a header that does not validate.'''

    def __init__(self, chain, validity, value=None):
        self.validity = validity
        super().__init__(chain, value=value, message=f'ill-formed Mary header ({validity.name}): {value!r}')


class UnrecoverableException(MaryException):
    '''This is useful when is not possible to let an unknown value
    slip through: it means the caller is using the API in the wrong way.'''
    pass


class ConstructionException(UnrecoverableException):
    pass


class IllegalTypeException(UnrecoverableException):
    pass


class NotAMaryFileException(MaryException):

    def __init__(self, path, validity, value=None):
        self.path = path
        self.validity = validity
        super().__init__([], value=value, message=f'file [{path}] is not a valid Mary format file ({validity.name})')
