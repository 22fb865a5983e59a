"""Report builder — text output for scheme dumps and scheme diffs."""

from scheme_checker.core.palette import RESET, cyan, green, red, rgb, yellow
from scheme_checker.core.types import INHERIT, ColorScheme, PropertyMap, SchemeDiff

KEY_WIDTH = 50


def _pad(name: str) -> str:
    return f'{name}:'.ljust(KEY_WIDTH)


def format_color(name: str, color: str) -> str:
    """One colour line: padded name, then a swatch and the hex value."""
    line = f'{_pad(name)} '
    if color:
        line += f'{rgb(color, background=True)}  {RESET} #{color}'
    return line


def format_attributes(name: str, props: PropertyMap | None) -> str:
    """One attribute line, drawn in its own foreground/background colours.

    Inherit references render as '=> base'. A set error_stripe_color adds a
    second line underlining the name in the stripe colour.
    """
    padded = _pad(name)
    if props is None:
        return f'{padded} {red("<null>")}'
    if INHERIT in props:
        return f'{padded} => {cyan(props[INHERIT])}{RESET}'

    pre = rgb(props.get('foreground')) + rgb(props.get('background'), background=True)
    pairs = ', '.join(f'{k}={v}' for k, v in props.items())
    stripe = ''
    if 'error_stripe_color' in props:
        stripe = f'\n{rgb(props["error_stripe_color"])}{"¯" * len(name)}{RESET}'
    return f'{pre}{padded} {pairs}{RESET}{stripe}'


def format_scheme(scheme: ColorScheme, path: str) -> str:
    """Format every colour and attribute of a scheme."""
    lines = [f'Displaying colors in {cyan(path)}:', '']
    for name, color in scheme.colors.items():
        lines.append(format_color(name, color))
    lines.append('')

    lines += [f'Displaying attributes in {cyan(path)}:', '']
    for name, props in scheme.attributes.items():
        lines.append(format_attributes(name, props))
    return '\n'.join(lines)


def format_diff(diff: SchemeDiff, baseline_path: str, candidate_path: str) -> str:
    """Format a scheme diff as Changed / Removed / Added sections."""
    lines = [f'Comparing {cyan(baseline_path)} with {cyan(candidate_path)}...']

    if diff.changed:
        lines.append(yellow('Changed:'))
        for key, candidate, baseline in diff.changed:
            lines.append(key)
            lines.append('  ' + format_attributes('Baseline', baseline))
            lines.append('  ' + format_attributes('Candidate', candidate))
            lines.append('')
        lines.append('')

    if diff.removed:
        lines.append(red('Removed:'))
        for key, _candidate, baseline in diff.removed:
            lines.append(format_attributes(key, baseline))
        lines.append('')

    if diff.added:
        lines.append(green('Added:'))
        for key, candidate, _baseline in diff.added:
            lines.append(format_attributes(key, candidate))
        lines.append('')

    if diff.is_empty:
        lines.append('Color schemes are equal!')
    return '\n'.join(lines)
