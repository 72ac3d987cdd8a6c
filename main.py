import argparse
import sys

from app import Presenter
from errors import FatalError
from renderer import load_theme


def _fail(err: Exception) -> int:
    print(f"[slides] {type(err).__name__}: {err}", file=sys.stderr)
    return 1


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="slides",
        description="Present a text document as slides in the terminal.",
    )
    parser.add_argument("file", help="document to present; slides are separated by ---")
    parser.add_argument("--theme", help="JSON style theme for the slide renderer")
    args = parser.parse_args(argv)

    try:
        theme = load_theme(args.theme) if args.theme else None
        presenter = Presenter(args.file, theme=theme)
    except FatalError as err:
        return _fail(err)

    err = presenter.run()
    if err is not None:
        return _fail(err)
    return 0

if __name__ == "__main__":
    sys.exit(main())
