"""A tiny CLI to run the lights demo.

Invoke using e.g. ``python -m lightrig`` to open a window, or
``python -m lightrig --offscreen --frames 10 --snapshot frame.png`` to
render without a window.
"""

import sys
import logging
import argparse

import lightrig
from lightrig.demo import bind_light_controls, create_context
from lightrig.utils import logger
from lightrig.utils.loop import RenderLoop
from lightrig.utils.surface import OffscreenSurface


def get_parser():
    parser = argparse.ArgumentParser(
        prog="lightrig",
        description="Show four meshes lit by five lights, with a slider per light.",
    )
    parser.add_argument(
        "--version", action="version", version="lightrig v" + lightrig.__version__
    )
    parser.add_argument(
        "--size",
        type=int,
        nargs=2,
        default=[800, 600],
        metavar=("W", "H"),
        help="The size of the output in logical pixels (default 800 600)",
    )
    parser.add_argument(
        "--max-fps",
        type=float,
        default=60,
        help="The maximum number of frames per second (default 60)",
    )
    parser.add_argument(
        "--offscreen",
        action="store_true",
        help="Render to an offscreen surface instead of a window",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="Stop after this many frames (default 1 offscreen, unlimited in a window)",
    )
    parser.add_argument(
        "--snapshot",
        metavar="FILE",
        default=None,
        help="Write the last rendered frame to this image file",
    )
    parser.add_argument(
        "--show-fps",
        action="store_true",
        help="Log the frames per second",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="The log level, e.g. 'debug' or 'info'",
    )
    return parser


def save_snapshot(renderer, filename):
    """Write the renderer's current image to a file."""
    import imageio.v3 as iio

    image = renderer.snapshot()
    iio.imwrite(filename, image)
    logger.info(f"Wrote snapshot of {image.shape[1]}x{image.shape[0]} to {filename}")


def run_offscreen(args):
    width, height = args.size
    surface = OffscreenSurface(width, height)
    context = create_context(surface, size=(width, height), show_fps=args.show_fps)
    bind_light_controls(context.lights)

    loop = RenderLoop(context, max_fps=args.max_fps)
    frames = 1 if args.frames is None else args.frames
    loop.run(max_ticks=frames)

    if args.snapshot:
        save_snapshot(context.renderer, args.snapshot)


def run_window(args):
    from lightrig.utils.show import Display

    width, height = args.size
    context = create_context(size=(width, height), show_fps=args.show_fps)
    panel = bind_light_controls(context.lights)

    display = Display(
        context,
        panel=panel,
        size=(width, height),
        max_fps=args.max_fps,
        max_ticks=args.frames,
    )
    display.show()

    if args.snapshot:
        save_snapshot(context.renderer, args.snapshot)


def main(argv=None):
    parser = get_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    if args.log_level:
        level = args.log_level
        try:
            logger.setLevel(int(level) if level.isnumeric() else level.upper())
        except ValueError:
            parser.error(f"Invalid log level: {level}")

    if args.size[0] <= 0 or args.size[1] <= 0:
        parser.error("The size must be positive.")
    if args.frames is not None and args.frames < 1:
        parser.error("The number of frames must be at least 1.")

    if args.offscreen:
        run_offscreen(args)
    else:
        run_window(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
