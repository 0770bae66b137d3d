class Error(Exception):
    exit_code = 1


class UpdateError(Error):
    # EX_IOERR from sysexits.h
    exit_code = 74


class StaleWriterError(Error):
    pass
