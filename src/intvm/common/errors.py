class VMError(Exception):
    pass


class ParseError(VMError):
    ''' Program text holds something other than comma-separated integers '''

    def __init__(self, message: str, column: int | None = None):
        super().__init__(message)
        self.column = column


class DecodeError(VMError):
    ''' Instruction word cannot be decoded; execution must stop '''

    def __init__(self, message: str, address: int | None = None):
        if address is not None:
            message = f'{message} at {address}'

        super().__init__(message)
        self.address = address


class AddressError(VMError):
    pass


class EmptyOutputRead(VMError):
    pass
