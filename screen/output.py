import sys

import colorama


def color_str(color, s):
    return f"{color}{s}{colorama.Fore.RESET}{colorama.Style.RESET_ALL}"


def color_print(color, s, **kwargs):
    kwargs.setdefault("file", sys.stderr)
    print(color_str(color, s), **kwargs)


def print_error(s, **kwargs):
    color_print(colorama.Fore.RED, s, **kwargs)


def print_warning(s, **kwargs):
    color_print(colorama.Fore.YELLOW, s, **kwargs)


def print_success(s, **kwargs):
    color_print(colorama.Fore.GREEN, s, **kwargs)


def print_info(s, **kwargs):
    color_print(colorama.Fore.CYAN, s, **kwargs)
