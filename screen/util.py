import sys
from functools import wraps

from .errors import Error
from .output import print_error


def handle_errors(func):
    @wraps(func)
    def wrapped(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Error as error:
            print_error(str(error))
            sys.exit(error.exit_code)

    return wrapped
