class IntcodeError(Exception):
    pass


class ProgramLoadError(IntcodeError):
    pass


class InvalidOpcode(IntcodeError):
    def __init__(self, word: int, address: int | None = None):
        self.word = word
        self.address = address
        super().__init__(f'Invalid opcode in word {word} at {address}')


class InvalidMode(IntcodeError):
    def __init__(self, word: int, mode: int, address: int | None = None):
        self.word = word
        self.mode = mode
        self.address = address
        super().__init__(f'Invalid mode {mode} in word {word} at {address}')


class NegativeAddress(IntcodeError):
    def __init__(self, address: int):
        self.address = address
        super().__init__(f'Negative address {address}')


class NeedsInputViolation(IntcodeError):
    pass


class ProtocolViolation(IntcodeError):
    pass


class NetworkStalled(IntcodeError):
    pass
