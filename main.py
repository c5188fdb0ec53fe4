import argparse
from setsim.renderer import NullRenderer
from setsim.trials import run_trials


DISPLAYS = ["color", "curses", "pygame", "none"]

# =========================================================
# Renderers
# =========================================================
def create_renderer(display, plot=False, plot_path=None, delay_ms=0):

    if display == "color":
        from setsim.console import ColorRenderer
        return ColorRenderer()

    if display == "curses":
        from setsim.console import CursesRenderer
        return CursesRenderer()

    if display == "pygame":
        from setsim.hmi import PygameRenderer
        return PygameRenderer(show=True, delay_ms=delay_ms, plot=plot, plot_path=plot_path)

    return NullRenderer()


def positive_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value!r}")
    return number


# =========================================================
# Main
# =========================================================
def build_parser():
    parser = argparse.ArgumentParser(
        description="Play shuffled Set decks until no set is left and histogram the leftover cards."
    )

    parser.add_argument(
        "iterations",
        type=positive_int,
        metavar="ITERATIONS",
        help="Number of decks to play."
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the shuffles for a reproducible run."
    )
    parser.add_argument(
        "--display",
        type=str,
        default="color",
        choices=DISPLAYS,
        help="How to show tables and results."
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Show the leftover histogram with matplotlib."
    )
    parser.add_argument(
        "--save-plot",
        type=str,
        default=None,
        metavar="PATH",
        help="Save the leftover histogram plot to PATH."
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=0,
        help="Pause after each pygame frame."
    )
    parser.add_argument(
        "--verbose-level",
        type=int,
        default=0,
        help="0 = silent, 1 = progress and summary, 2 = every trial."
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    with create_renderer(args.display, args.plot, args.save_plot, args.delay_ms) as renderer:
        histogram = run_trials(
            args.iterations,
            seed=args.seed,
            renderer=renderer,
            verbose_level=args.verbose_level
        )

    # ---- Plot leftovers ----
    if args.display != "pygame" and (args.plot or args.save_plot):
        from setsim.hmi import plot_histogram
        plot_histogram(histogram, path=args.save_plot, show=args.plot)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
