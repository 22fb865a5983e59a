"""scheme-tool — Dump or diff IntelliJ-style colour scheme XML files.

Usage: uv run scheme-tool [scheme]

With no argument, prints every colour and attribute of the baseline scheme.
With a scheme argument, compares the baseline against it and prints which
attributes changed, were removed or were added.

The baseline is resources/META-INF/Prplkai.xml, relative to the cwd.
Exit code 1 if a scheme file does not exist or is not well-formed XML.
"""

import argparse
import sys

from lxml import etree

from scheme_checker.core.diff import diff_schemes
from scheme_checker.core.report import format_diff, format_scheme
from scheme_checker.core.scheme_parser import SchemeNotFoundError, parse_scheme_file

DEFAULT_SCHEME = 'resources/META-INF/Prplkai.xml'


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  scheme-tool\n'
        '  scheme-tool ~/Downloads/Monokai.xml\n'
    )
    parser = argparse.ArgumentParser(
        prog='scheme-tool',
        description='Display a colour scheme, or diff another scheme against it.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('scheme', nargs='?', help='Scheme to compare against the baseline')
    return parser


def run(baseline_path: str, candidate_path: str | None = None) -> str:
    """Parse the scheme(s) and return the rendered report."""
    baseline = parse_scheme_file(baseline_path)
    if candidate_path is None:
        return format_scheme(baseline, baseline_path)

    candidate = parse_scheme_file(candidate_path)
    return format_diff(diff_schemes(baseline, candidate), baseline_path, candidate_path)


def main(argv: list[str] | None = None, default_scheme_path: str = DEFAULT_SCHEME) -> None:
    args = _build_parser().parse_args(argv)

    try:
        output = run(default_scheme_path, args.scheme)
    except SchemeNotFoundError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    except etree.XMLSyntaxError as e:
        print(f'Error: malformed scheme XML: {e}', file=sys.stderr)
        sys.exit(1)

    print(output)


if __name__ == '__main__':
    main()
