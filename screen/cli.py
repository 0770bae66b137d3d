import sys
import time
from datetime import datetime

import blessed
import click
import colorama

from .output import print_info, print_success, print_warning
from .screenbuffer import ScreenBuffer
from .util import handle_errors


@click.group()
def main_group():
    pass


@main_group.command(name="echo", short_help="Print words through the screen buffer")
@click.option(
    "--newline/--no-newline",
    default=True,
    help="Terminate the output with a newline",
)
@click.argument("words", nargs=-1)
@handle_errors
def cmd_echo(newline: bool, words: tuple[str, ...]):
    screen = ScreenBuffer(blessed.Terminal(stream=sys.stdout))
    if newline:
        screen.println(*words)
    else:
        screen.print(" ".join(words))
    screen.update()


def draw_frame(screen: ScreenBuffer, frame: int, frames: int, clear: bool):
    if clear:
        screen.clear()
    screen.printf("Frame %d of %d\n", frame, frames)
    screen.println("Rendered at", datetime.now().strftime("%H:%M:%S.%f")[:-3])
    screen.print("#" * frame, "\n")


@main_group.command(name="demo", short_help="Redraw the screen a number of times")
@click.option(
    "-n",
    "--frames",
    envvar="SCREEN_DEMO_FRAMES",
    type=click.IntRange(min=1),
    default=10,
    help="How many frames to draw",
)
@click.option(
    "-i",
    "--interval",
    envvar="SCREEN_DEMO_INTERVAL",
    type=click.FloatRange(min=0),
    default=0.5,
    help="Seconds to wait between frames",
)
@click.option(
    "--clear/--no-clear",
    default=True,
    help="Clear the screen before each frame",
)
@handle_errors
def cmd_demo(frames: int, interval: float, clear: bool):
    screen = ScreenBuffer(blessed.Terminal(stream=sys.stdout))
    print_info(f"Drawing {frames} frames")
    if not clear:
        print_warning("Frames are drawn without clearing the screen")
    for frame in range(1, frames + 1):
        draw_frame(screen, frame, frames, clear)
        screen.update()
        if frame < frames:
            time.sleep(interval)
    print_success("Done")


def run_main():
    colorama.init()
    main_group()


if __name__ == "__main__":
    run_main()
